"""
Queries over schema nodes.

Each dispatch matches every variant of ``Schema`` explicitly and ends in
``assert_never``, so adding a variant breaks these functions under a type
checker until they handle it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import assert_never

from .nodes import (
    AllOf,
    AnyOf,
    ArraySchema,
    BaseFields,
    BooleanSchema,
    CustomFormat,
    Fallback,
    Format,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OneOf,
    RefSchema,
    Schema,
    SchemaKind,
    StringFormat,
    StringSchema,
)


def get_name(schema: Schema) -> str | None:
    """Return the title of a schema. ``Fallback`` has none."""
    match schema:
        case ObjectSchema():
            return schema.title
        case ArraySchema():
            return schema.title
        case StringSchema():
            return schema.title
        case IntegerSchema():
            return schema.title
        case NumberSchema():
            return schema.title
        case BooleanSchema():
            return schema.title
        case NullSchema():
            return schema.title
        case RefSchema():
            return schema.title
        case OneOf():
            return schema.combinator.title
        case AnyOf():
            return schema.combinator.title
        case AllOf():
            return schema.combinator.title
        case Fallback():
            return None
        case _:
            assert_never(schema)


def schema_kind(schema: Schema) -> SchemaKind:
    match schema:
        case ObjectSchema():
            return SchemaKind.OBJECT
        case ArraySchema():
            return SchemaKind.ARRAY
        case StringSchema():
            return SchemaKind.STRING
        case IntegerSchema():
            return SchemaKind.INTEGER
        case NumberSchema():
            return SchemaKind.NUMBER
        case BooleanSchema():
            return SchemaKind.BOOLEAN
        case NullSchema():
            return SchemaKind.NULL
        case RefSchema():
            return SchemaKind.REF
        case OneOf():
            return SchemaKind.ONE_OF
        case AnyOf():
            return SchemaKind.ANY_OF
        case AllOf():
            return SchemaKind.ALL_OF
        case Fallback():
            return SchemaKind.FALLBACK
        case _:
            assert_never(schema)


def get_base_fields(schema: Schema) -> BaseFields | None:
    """
    Return the record holding title, description and examples.

    For combinators this is the shared ``CombinatorSchema``; ``Fallback``
    carries no base fields.
    """
    match schema:
        case (
            ObjectSchema()
            | ArraySchema()
            | StringSchema()
            | IntegerSchema()
            | NumberSchema()
            | BooleanSchema()
            | NullSchema()
            | RefSchema()
        ):
            return schema
        case OneOf() | AnyOf() | AllOf():
            return schema.combinator
        case Fallback():
            return None
        case _:
            assert_never(schema)


def iter_sub_schemas(schema: Schema) -> Iterator[tuple[str, Schema]]:
    """
    Yield the direct children of a schema with their pointer segment.

    Segments are relative, e.g. ``properties/name``, ``items`` or ``oneOf/0``.
    """
    match schema:
        case ObjectSchema():
            for prop in schema.properties:
                yield f"properties/{_escape(prop.name)}", prop.schema
        case ArraySchema():
            if schema.items is not None:
                yield "items", schema.items
        case OneOf() | AnyOf() | AllOf():
            keyword = schema_kind(schema).value
            for i, sub_schema in enumerate(schema.sub_schemas):
                yield f"{keyword}/{i}", sub_schema
        case (
            StringSchema()
            | IntegerSchema()
            | NumberSchema()
            | BooleanSchema()
            | NullSchema()
            | RefSchema()
            | Fallback()
        ):
            return
        case _:
            assert_never(schema)


def walk(schema: Schema, pointer: str = "#") -> Iterator[tuple[str, Schema]]:
    """Depth-first, pre-order traversal yielding ``(pointer, schema)`` pairs."""
    stack = [(pointer, schema)]
    while stack:
        pointer, node = stack.pop()
        yield pointer, node
        children = [(f"{pointer}/{segment}", child) for segment, child in iter_sub_schemas(node)]
        # Reversed so the first child is popped first
        stack.extend(reversed(children))


def format_name(fmt: Format) -> str:
    """Return the format keyword for a built-in or custom format."""
    match fmt:
        case StringFormat():
            return fmt.value
        case CustomFormat():
            return fmt.name
        case _:
            assert_never(fmt)


def _escape(segment: str) -> str:
    # JSON Pointer escaping (RFC 6901)
    return segment.replace("~", "~0").replace("/", "~1")
