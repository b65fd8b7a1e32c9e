"""JSON Schema Model

A strongly-typed, immutable in-memory representation of JSON Schema
documents for validators, editors and code generators.
"""

__version__ = "1.0.0"

from .config import ConfigError, KeyOrder, MissingRequiredPolicy, ModelConfig
from .outline import render_outline
from .schema_model import (
    AllOf,
    AnyOf,
    ArraySchema,
    BooleanSchema,
    CombinatorSchema,
    CustomFormat,
    Fallback,
    IntegerSchema,
    Model,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OneOf,
    OptionalProperty,
    RefSchema,
    RequiredProperty,
    Schema,
    SchemaKind,
    StringFormat,
    StringSchema,
    all_of,
    any_of,
    array_schema,
    base_combinator_schema,
    boolean_schema,
    fallback,
    get_name,
    integer_schema,
    model,
    null_schema,
    number_schema,
    object_schema,
    one_of,
    reference_schema,
    string_schema,
    thaw,
    walk,
)

__all__ = [
    "ModelConfig",
    "KeyOrder",
    "MissingRequiredPolicy",
    "ConfigError",
    "render_outline",
    "Schema",
    "SchemaKind",
    "Model",
    "ObjectSchema",
    "RequiredProperty",
    "OptionalProperty",
    "ArraySchema",
    "StringSchema",
    "StringFormat",
    "CustomFormat",
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
    "get_name",
    "thaw",
    "walk",
]
