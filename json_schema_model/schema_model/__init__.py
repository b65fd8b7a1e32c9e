"""
Schema model module.

Contains the node definitions, their constructors and the queries that
dispatch over every schema kind.
"""

from __future__ import annotations

from .builders import (
    all_of,
    any_of,
    array_schema,
    base_combinator_schema,
    boolean_schema,
    fallback,
    integer_schema,
    model,
    null_schema,
    number_schema,
    object_schema,
    one_of,
    reference_schema,
    string_format,
    string_schema,
)
from .nodes import (
    AllOf,
    AnyOf,
    ArraySchema,
    BaseFields,
    BaseNumberSchema,
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
    SchemaKind,
    StringFormat,
    StringSchema,
    WithEnumSchema,
)
from .json_values import FrozenDict, freeze, thaw
from .queries import format_name, get_base_fields, get_name, iter_sub_schemas, schema_kind, walk

__all__ = [
    "Schema",
    "SchemaKind",
    "Model",
    "BaseFields",
    "WithEnumSchema",
    "BaseNumberSchema",
    "ObjectSchema",
    "ObjectProperty",
    "RequiredProperty",
    "OptionalProperty",
    "ArraySchema",
    "StringSchema",
    "StringFormat",
    "CustomFormat",
    "Format",
    "IntegerSchema",
    "NumberSchema",
    "BooleanSchema",
    "NullSchema",
    "RefSchema",
    "CombinatorSchema",
    "OneOf",
    "AnyOf",
    "AllOf",
    "Fallback",
    "object_schema",
    "array_schema",
    "integer_schema",
    "number_schema",
    "string_schema",
    "boolean_schema",
    "null_schema",
    "reference_schema",
    "base_combinator_schema",
    "one_of",
    "any_of",
    "all_of",
    "fallback",
    "model",
    "string_format",
    "format_name",
    "get_name",
    "get_base_fields",
    "schema_kind",
    "iter_sub_schemas",
    "walk",
    "FrozenDict",
    "freeze",
    "thaw",
]
