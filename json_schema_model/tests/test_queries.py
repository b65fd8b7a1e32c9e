#!/usr/bin/env python3

import json
from typing import Any

import pytest

from json_schema_model import SchemaKind, StringFormat
from json_schema_model.schema_model import (
    AllOf,
    AnyOf,
    ArraySchema,
    BooleanSchema,
    CustomFormat,
    Fallback,
    IntegerSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    OneOf,
    RefSchema,
    Schema,
    StringSchema,
    all_of,
    any_of,
    array_schema,
    base_combinator_schema,
    boolean_schema,
    fallback,
    format_name,
    get_base_fields,
    get_name,
    integer_schema,
    iter_sub_schemas,
    null_schema,
    number_schema,
    object_schema,
    one_of,
    reference_schema,
    schema_kind,
    string_schema,
    thaw,
    walk,
)


def _leaf():
    return null_schema(None, None, [])


def titled_schemas(title):
    """One schema of every kind carrying ``title``, paired with its kind."""
    combinator = base_combinator_schema(title, None, [_leaf()], [])
    return [
        (object_schema(title, None, {}, [], None, None, []), SchemaKind.OBJECT),
        (array_schema(title, None, None, None, None, []), SchemaKind.ARRAY),
        (string_schema(title, None, None, None, None, None, None, []), SchemaKind.STRING),
        (integer_schema(title, None, None, None, [], None), SchemaKind.INTEGER),
        (number_schema(title, None, None, None, [], None), SchemaKind.NUMBER),
        (boolean_schema(title, None, [], None), SchemaKind.BOOLEAN),
        (null_schema(title, None, []), SchemaKind.NULL),
        (reference_schema(title, None, "#/definitions/X", []), SchemaKind.REF),
        (one_of(combinator), SchemaKind.ONE_OF),
        (any_of(combinator), SchemaKind.ANY_OF),
        (all_of(combinator), SchemaKind.ALL_OF),
    ]


class TestGetName:
    """get_name returns the constructor's title for every kind"""

    @pytest.mark.parametrize("title", ["Some title", "", None])
    def test_every_kind(self, title):
        for schema, _ in titled_schemas(title):
            assert get_name(schema) == title

    @pytest.mark.parametrize("payload", [{"title": "Looks titled"}, {"$dynamicAnchor": "foo"}, "text", 3, None, []])
    def test_fallback_has_no_name(self, payload):
        assert get_name(fallback(payload)) is None

    def test_rejects_non_schema(self):
        with pytest.raises(AssertionError):
            get_name({"title": "raw dict"})


class TestSchemaKind:
    def test_every_kind(self):
        for schema, kind in titled_schemas("T"):
            assert schema_kind(schema) == kind
        assert schema_kind(fallback({})) == SchemaKind.FALLBACK

    def test_every_variant_covered(self):
        # Twelve variants, twelve kinds
        assert len(Schema.__args__) == len(SchemaKind) == 12
        seen = {type(schema) for schema, _ in titled_schemas(None)} | {Fallback}
        assert seen == set(Schema.__args__)


class TestBaseFields:
    def test_plain_kinds_return_themselves(self):
        for schema, kind in titled_schemas("T"):
            base = get_base_fields(schema)
            if kind in (SchemaKind.ONE_OF, SchemaKind.ANY_OF, SchemaKind.ALL_OF):
                assert base is schema.combinator
            else:
                assert base is schema
            assert base.title == "T"

    def test_fallback(self):
        assert get_base_fields(fallback({"x": 1})) is None

    def test_mixin_fields_readable_on_any_kind(self):
        for schema, _ in titled_schemas("T"):
            base = get_base_fields(schema)
            assert base.description is None
            assert base.examples == ()


class TestTraversal:
    def setup_method(self):
        self.tags = array_schema(None, None, string_schema(None, None, None, None, None, None, None, []), None, None, [])
        self.choice = one_of(base_combinator_schema(None, None, [_leaf(), fallback({"x": 1})], []))
        self.root = object_schema(
            None,
            None,
            {"tags": self.tags, "choice": self.choice, "a/b": _leaf()},
            ["tags"],
            None,
            None,
            [],
        )

    def test_iter_sub_schemas(self):
        children = list(iter_sub_schemas(self.root))
        assert [segment for segment, _ in children] == ["properties/a~1b", "properties/choice", "properties/tags"]
        assert children[2][1] is self.tags

    def test_leaves_have_no_children(self):
        for schema in [_leaf(), fallback({"items": {}}), reference_schema(None, None, "#", [])]:
            assert list(iter_sub_schemas(schema)) == []

    def test_walk(self):
        pointers = [pointer for pointer, _ in walk(self.root)]
        assert pointers == [
            "#",
            "#/properties/a~1b",
            "#/properties/choice",
            "#/properties/choice/oneOf/0",
            "#/properties/choice/oneOf/1",
            "#/properties/tags",
            "#/properties/tags/items",
        ]

    def test_walk_combinators_use_their_keyword(self):
        combinator = base_combinator_schema(None, None, [_leaf()], [])
        assert [p for p, _ in walk(any_of(combinator))] == ["#", "#/anyOf/0"]
        assert [p for p, _ in walk(all_of(combinator))] == ["#", "#/allOf/0"]

    def test_walk_deep_chain(self):
        depth = 5000
        schema = _leaf()
        for _ in range(depth):
            schema = array_schema(None, None, schema, None, None, [])

        count = 0
        last = None
        for pointer, node in walk(schema):
            count += 1
            last = pointer, node
        assert count == depth + 1
        assert last[0] == "#" + "/items" * depth
        assert isinstance(last[1], NullSchema)


def test_format_name():
    assert format_name(StringFormat.DATE_TIME) == "date-time"
    assert format_name(CustomFormat("uuid")) == "uuid"


def encode(schema: Schema) -> Any:
    """Minimal encoder covering every variant, as an external collaborator would."""
    match schema:
        case Fallback():
            return thaw(schema.value)
        case RefSchema():
            return {"$ref": schema.ref}
        case ObjectSchema():
            return {
                "type": "object",
                "properties": {p.name: encode(p.schema) for p in schema.properties},
                "required": list(schema.required_names),
            }
        case ArraySchema():
            return {"type": "array", **({"items": encode(schema.items)} if schema.items else {})}
        case OneOf() | AnyOf() | AllOf():
            return {schema_kind(schema).value: [encode(s) for s in schema.sub_schemas]}
        case StringSchema() | IntegerSchema() | NumberSchema() | BooleanSchema() | NullSchema():
            return {"type": schema_kind(schema).value}


def test_fallback_round_trips_through_encoder():
    raw = json.loads('{"$dynamicAnchor": "foo"}')
    node = fallback(raw)

    assert get_name(node) is None
    assert encode(node) == raw
    assert json.dumps(encode(node)) == '{"$dynamicAnchor": "foo"}'


def test_fallback_nested_in_tree_is_reemitted_verbatim():
    raw = {"if": {"const": 1}, "then": {"minimum": 0}}
    root = object_schema(None, None, {"cond": fallback(raw)}, [], None, None, [])
    assert encode(root)["properties"]["cond"] == raw


if __name__ == "__main__":
    pytest.main([__file__])
