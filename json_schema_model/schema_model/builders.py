"""
Constructors for every schema kind.

All builders are total: they assemble records from already well-typed
values and never reject inconsistent constraints (e.g. minimum > maximum).
Judging the data is left to validators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import KeyOrder, MissingRequiredPolicy, ModelConfig
from .nodes import (
    AllOf,
    AnyOf,
    ArraySchema,
    BooleanSchema,
    CombinatorSchema,
    CustomFormat,
    Fallback,
    Format,
    IntegerSchema,
    Model,
    NullSchema,
    NumberSchema,
    ObjectProperty,
    ObjectSchema,
    OneOf,
    OptionalProperty,
    RefSchema,
    RequiredProperty,
    Schema,
    StringFormat,
    StringSchema,
)

logger = logging.getLogger(__name__)


def _examples(examples: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(examples)


def _enum(values: Iterable[Any] | None) -> tuple[Any, ...] | None:
    return None if values is None else tuple(values)


def _ordered_keys(mapping: Mapping[str, Any], config: ModelConfig) -> list[str]:
    if config.key_order == KeyOrder.SORTED:
        return sorted(mapping)
    return list(mapping)


def object_schema(
    title: str | None,
    description: str | None,
    properties: Mapping[str, Schema],
    required: Iterable[str],
    min_properties: int | None,
    max_properties: int | None,
    examples: Iterable[Any],
    *,
    config: ModelConfig | None = None,
) -> ObjectSchema:
    """
    Build an object schema, splitting properties into required and optional.

    A property whose name is listed in ``required`` becomes a
    ``RequiredProperty``, every other property an ``OptionalProperty``.
    Required names with no matching property are dropped.

    Args:
        properties: Property name to schema mapping
        required: Names of required properties
        config: Controls property order and the missing-required policy

    Returns:
        ObjectSchema whose properties follow ``config.key_order``
    """
    config = config or ModelConfig()
    required_names = set(required)

    partitioned: list[ObjectProperty] = []
    for name in _ordered_keys(properties, config):
        if name in required_names:
            partitioned.append(RequiredProperty(name, properties[name]))
        else:
            partitioned.append(OptionalProperty(name, properties[name]))

    missing = sorted(required_names.difference(properties))
    if missing and config.missing_required == MissingRequiredPolicy.WARN:
        logger.warning(
            "Object schema %r lists required properties with no definition: %s",
            title,
            ", ".join(missing),
        )

    return ObjectSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        properties=tuple(partitioned),
        min_properties=min_properties,
        max_properties=max_properties,
    )


def array_schema(
    title: str | None,
    description: str | None,
    items: Schema | None,
    min_items: int | None,
    max_items: int | None,
    examples: Iterable[Any],
) -> ArraySchema:
    return ArraySchema(
        title=title,
        description=description,
        examples=_examples(examples),
        items=items,
        min_items=min_items,
        max_items=max_items,
    )


def integer_schema(
    title: str | None,
    description: str | None,
    minimum: int | None,
    maximum: int | None,
    examples: Iterable[Any],
    enum: Iterable[int] | None,
    *,
    exclusive_minimum: int | None = None,
    exclusive_maximum: int | None = None,
    multiple_of: int | None = None,
) -> IntegerSchema:
    return IntegerSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        enum=_enum(enum),
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        multiple_of=multiple_of,
    )


def number_schema(
    title: str | None,
    description: str | None,
    minimum: float | None,
    maximum: float | None,
    examples: Iterable[Any],
    enum: Iterable[float] | None,
    *,
    exclusive_minimum: float | None = None,
    exclusive_maximum: float | None = None,
    multiple_of: float | None = None,
) -> NumberSchema:
    return NumberSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        enum=_enum(enum),
        minimum=minimum,
        maximum=maximum,
        exclusive_minimum=exclusive_minimum,
        exclusive_maximum=exclusive_maximum,
        multiple_of=multiple_of,
    )


def string_schema(
    title: str | None,
    description: str | None,
    min_length: int | None,
    max_length: int | None,
    pattern: str | None,
    format: Format | None,
    enum: Iterable[str] | None,
    examples: Iterable[Any],
) -> StringSchema:
    return StringSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        enum=_enum(enum),
        min_length=min_length,
        max_length=max_length,
        pattern=pattern,
        format=format,
    )


def boolean_schema(
    title: str | None,
    description: str | None,
    examples: Iterable[Any],
    enum: Iterable[bool] | None,
) -> BooleanSchema:
    return BooleanSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        enum=_enum(enum),
    )


def null_schema(title: str | None, description: str | None, examples: Iterable[Any]) -> NullSchema:
    return NullSchema(title=title, description=description, examples=_examples(examples))


def reference_schema(title: str | None, description: str | None, ref: str, examples: Iterable[Any]) -> RefSchema:
    """Build a reference node. ``ref`` is stored verbatim and never resolved."""
    return RefSchema(title=title, description=description, examples=_examples(examples), ref=ref)


def base_combinator_schema(
    title: str | None,
    description: str | None,
    sub_schemas: Iterable[Schema],
    examples: Iterable[Any],
) -> CombinatorSchema:
    """
    Build the record shared by all combinators.

    Wrap the result with ``one_of``, ``any_of`` or ``all_of`` to choose
    the combinator semantics.
    """
    return CombinatorSchema(
        title=title,
        description=description,
        examples=_examples(examples),
        sub_schemas=tuple(sub_schemas),
    )


def one_of(combinator: CombinatorSchema) -> OneOf:
    return OneOf(combinator)


def any_of(combinator: CombinatorSchema) -> AnyOf:
    return AnyOf(combinator)


def all_of(combinator: CombinatorSchema) -> AllOf:
    return AllOf(combinator)


def fallback(value: Any) -> Fallback:
    """Carry an unmodeled JSON fragment through the tree untouched."""
    return Fallback(value)


def model(definitions: Mapping[str, Schema], root: Schema, *, config: ModelConfig | None = None) -> Model:
    """Build a model, ordering the definitions table per ``config.key_order``."""
    config = config or ModelConfig()
    table = {name: definitions[name] for name in _ordered_keys(definitions, config)}
    return Model(definitions=table, root=root)


def string_format(name: str) -> Format:
    """Map a format keyword to a built-in format, or a custom one if unknown."""
    try:
        return StringFormat(name)
    except ValueError:
        return CustomFormat(name)
