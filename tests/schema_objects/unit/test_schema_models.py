"""Schema object tests."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

import pytest
from mapping_schema_creator.schema_objects import (
    SchemaDefinitionError,
    SchemaDocument,
    SchemaObject,
    SchemaProperty,
    SchemaType,
    schema_types_for,
)
from mapping_schema_creator.value_conversion import GeneratedId
from sample_entities import Address, Color


@pytest.mark.parametrize(
    ("python_type", "expected"),
    [
        (str, (SchemaType.STRING,)),
        (bool, (SchemaType.BOOLEAN,)),
        (int, (SchemaType.INT, SchemaType.LONG)),
        (float, (SchemaType.DOUBLE,)),
        (Decimal, (SchemaType.DECIMAL,)),
        (datetime, (SchemaType.DATE,)),
        (date, (SchemaType.DATE,)),
        (bytes, (SchemaType.BINARY,)),
        (UUID, (SchemaType.BINARY,)),
        (GeneratedId, (SchemaType.OBJECT_ID,)),
        (re.Pattern, (SchemaType.REGEX,)),
        (type(None), (SchemaType.NULL,)),
        (list, (SchemaType.ARRAY,)),
        (frozenset, (SchemaType.ARRAY,)),
        (dict, (SchemaType.OBJECT,)),
        (Mapping, (SchemaType.OBJECT,)),
        (object, (SchemaType.OBJECT,)),
        (Any, (SchemaType.OBJECT,)),
        (Address, (SchemaType.OBJECT,)),
        (Color, (SchemaType.OBJECT,)),
        (list[int], (SchemaType.ARRAY,)),
    ],
)
def test_schema_types_for_python_types(python_type: Any, expected: tuple[SchemaType, ...]) -> None:
    assert schema_types_for(python_type) == expected


def test_single_types_render_under_their_keyword() -> None:
    assert SchemaObject.of(str).to_document() == {"type": "string"}
    assert SchemaObject.of(datetime).to_document() == {"bsonType": "date"}


def test_multiple_types_render_as_list() -> None:
    assert SchemaObject.of_types(SchemaType.STRING, SchemaType.NULL).to_document() == {
        "type": ["string", "null"]
    }
    assert SchemaObject.of_types(SchemaType.BOOLEAN, SchemaType.INT).to_document() == {
        "bsonType": ["bool", "int"]
    }


def test_object_with_renders_nested_properties_and_required() -> None:
    schema = SchemaObject.object_with(
        [
            SchemaProperty.named("street", SchemaObject.of(str)),
            SchemaProperty.named("number", SchemaObject.of(int)),
        ],
        ["street", "street"],
    )

    assert schema.to_document() == {
        "type": "object",
        "required": ["street"],
        "properties": {
            "street": {"type": "string"},
            "number": {"bsonType": ["int", "long"]},
        },
    }


def test_possible_values_render_as_enum() -> None:
    schema = SchemaObject.of(str).with_possible_values(["A", "B"])

    assert schema.to_document() == {"type": "string", "enum": ["A", "B"]}


def test_items_render_for_arrays_only() -> None:
    schema = SchemaObject.of(list).with_items(SchemaObject.of(str))

    assert schema.to_document() == {"type": "array", "items": {"type": "string"}}
    with pytest.raises(SchemaDefinitionError):
        SchemaObject.of(str).with_items(SchemaObject.of(str))


def test_empty_identifier_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError):
        SchemaProperty.named("", SchemaObject.of(str))


def test_nested_properties_require_object_type() -> None:
    with pytest.raises(SchemaDefinitionError):
        SchemaObject(types=(SchemaType.STRING,), properties=())


def test_document_rejects_required_fields_outside_properties() -> None:
    with pytest.raises(SchemaDefinitionError, match="missing"):
        SchemaDocument(
            properties=(SchemaProperty.named("present", SchemaObject.of(str)),),
            required=("present", "missing"),
        )


def test_document_renders_plain_schema_and_validator() -> None:
    document = SchemaDocument(
        properties=(
            SchemaProperty.named("name", SchemaObject.of(str)),
            SchemaProperty.named("age", SchemaObject.of(int)),
        ),
        required=("name",),
        title="Person",
    )

    expected = {
        "type": "object",
        "title": "Person",
        "required": ["name"],
        "properties": {
            "name": {"type": "string"},
            "age": {"bsonType": ["int", "long"]},
        },
    }
    assert document.to_document() == expected
    assert document.to_validator() == {"$jsonSchema": expected}
    assert list(document.to_document()) == ["type", "title", "required", "properties"]


def test_rendering_returns_fresh_documents() -> None:
    document = SchemaDocument(properties=(SchemaProperty.named("name", SchemaObject.of(str)),))

    rendered = document.to_document()
    rendered["properties"]["name"]["type"] = "number"

    assert document.to_document()["properties"]["name"] == {"type": "string"}
