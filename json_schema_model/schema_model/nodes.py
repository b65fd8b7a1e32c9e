"""
Node definitions for the JSON Schema model.

Every schema kind is a frozen record. Fields shared between kinds are
declared once on small field mixins (``BaseFields``, ``WithEnumSchema``,
``BaseNumberSchema``) and flattened into the concrete records. ``Schema``
itself is a closed union of the twelve variant classes, never a common
base class.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeAlias, TypeVar

from .json_values import FrozenDict, freeze

P = TypeVar("P")  # Primitive enumerated by an enum list (int, float, str, bool)
N = TypeVar("N")  # Numeric type of a number schema (int or float)


class SchemaKind(str, Enum):
    """JSON Schema keyword identifying each variant."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    REF = "$ref"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"
    FALLBACK = "fallback"


class StringFormat(str, Enum):
    """Built-in string formats."""

    DATE_TIME = "date-time"
    EMAIL = "email"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"


@dataclass(frozen=True)
class CustomFormat:
    """A format outside the built-in set (validator specific or newer drafts)."""

    name: str


Format: TypeAlias = StringFormat | CustomFormat


# Field mixins


@dataclass(frozen=True, kw_only=True)
class BaseFields:
    """Fields carried by every modeled schema kind."""

    title: str | None = None
    description: str | None = None
    examples: tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "examples", freeze(tuple(self.examples)))


@dataclass(frozen=True, kw_only=True)
class WithEnumSchema(BaseFields, Generic[P]):
    """Adds an optional list of allowed primitive values."""

    enum: tuple[P, ...] | None = None

    def __post_init__(self):
        super().__post_init__()
        if self.enum is not None:
            object.__setattr__(self, "enum", tuple(self.enum))


@dataclass(frozen=True, kw_only=True)
class BaseNumberSchema(BaseFields, Generic[N]):
    """Range constraints shared by integer and number schemas."""

    minimum: N | None = None
    maximum: N | None = None
    exclusive_minimum: N | None = None
    exclusive_maximum: N | None = None
    multiple_of: N | None = None


# Object properties


@dataclass(frozen=True)
class RequiredProperty:
    name: str
    schema: Schema

    is_required: ClassVar[bool] = True


@dataclass(frozen=True)
class OptionalProperty:
    name: str
    schema: Schema

    is_required: ClassVar[bool] = False


ObjectProperty: TypeAlias = RequiredProperty | OptionalProperty


# Concrete kinds


@dataclass(frozen=True, kw_only=True)
class ObjectSchema(BaseFields):
    """An object schema with its properties already split into required/optional."""

    properties: tuple[ObjectProperty, ...] = ()
    min_properties: int | None = None
    max_properties: int | None = None

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "properties", tuple(self.properties))

    @property
    def property_names(self) -> tuple[str, ...]:
        return tuple(prop.name for prop in self.properties)

    @property
    def required_names(self) -> tuple[str, ...]:
        return tuple(prop.name for prop in self.properties if prop.is_required)

    def get_property(self, name: str) -> ObjectProperty | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass(frozen=True, kw_only=True)
class ArraySchema(BaseFields):
    items: Schema | None = None
    min_items: int | None = None
    max_items: int | None = None


@dataclass(frozen=True, kw_only=True)
class StringSchema(WithEnumSchema[str]):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: Format | None = None


@dataclass(frozen=True, kw_only=True)
class IntegerSchema(BaseNumberSchema[int], WithEnumSchema[int]):
    pass


@dataclass(frozen=True, kw_only=True)
class NumberSchema(BaseNumberSchema[float], WithEnumSchema[float]):
    pass


@dataclass(frozen=True, kw_only=True)
class BooleanSchema(WithEnumSchema[bool]):
    pass


@dataclass(frozen=True, kw_only=True)
class NullSchema(BaseFields):
    pass


@dataclass(frozen=True, kw_only=True)
class RefSchema(BaseFields):
    """A reference token, kept verbatim. Nothing here resolves it."""

    ref: str


@dataclass(frozen=True, kw_only=True)
class CombinatorSchema(BaseFields):
    """Record shape shared by oneOf, anyOf and allOf."""

    sub_schemas: tuple[Schema, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "sub_schemas", tuple(self.sub_schemas))


class _CombinatorFields:
    """Read-through access to the wrapped combinator record."""

    combinator: CombinatorSchema

    @property
    def title(self) -> str | None:
        return self.combinator.title

    @property
    def description(self) -> str | None:
        return self.combinator.description

    @property
    def examples(self) -> tuple[Any, ...]:
        return self.combinator.examples

    @property
    def sub_schemas(self) -> tuple[Schema, ...]:
        return self.combinator.sub_schemas


@dataclass(frozen=True)
class OneOf(_CombinatorFields):
    combinator: CombinatorSchema


@dataclass(frozen=True)
class AnyOf(_CombinatorFields):
    combinator: CombinatorSchema


@dataclass(frozen=True)
class AllOf(_CombinatorFields):
    combinator: CombinatorSchema


@dataclass(frozen=True)
class Fallback:
    """
    An unmodeled schema fragment carried verbatim.

    Has no base fields. Encoders re-emit ``thaw(value)`` unchanged.
    """

    value: Any

    def __post_init__(self):
        object.__setattr__(self, "value", freeze(self.value))


Schema: TypeAlias = (
    ObjectSchema
    | ArraySchema
    | StringSchema
    | IntegerSchema
    | NumberSchema
    | BooleanSchema
    | NullSchema
    | RefSchema
    | OneOf
    | AnyOf
    | AllOf
    | Fallback
)


@dataclass(frozen=True)
class Model:
    """A complete schema document: the root schema plus its named definitions."""

    definitions: Mapping[str, Schema]
    root: Schema

    def __post_init__(self):
        object.__setattr__(self, "definitions", FrozenDict(self.definitions))

    @property
    def definition_names(self) -> tuple[str, ...]:
        return tuple(self.definitions)

    def get_definition(self, name: str) -> Schema | None:
        """Look up a definition by its table key."""
        return self.definitions.get(name)
