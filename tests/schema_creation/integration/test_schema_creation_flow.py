"""End-to-end schema creation over a realistic entity."""

from __future__ import annotations

from mapping_schema_creator import MappingSchemaCreator
from sample_entities import Invoice, Person


def test_person_validator_document() -> None:
    document = MappingSchemaCreator().create_schema_for(Person).to_validator()

    assert document == {
        "$jsonSchema": {
            "type": "object",
            "required": [
                "_id",
                "ext_name",
                "age",
                "favorite_color",
                "address",
                "scores",
                "attributes",
                "balance",
                "visits",
            ],
            "properties": {
                "_id": {"type": "object"},
                "ext_name": {"type": "string"},
                "age": {"bsonType": ["int", "long"]},
                "favorite_color": {"type": "string", "enum": ["RED", "GREEN", "BLUE"]},
                "address": {
                    "type": "object",
                    "required": ["street", "town"],
                    "properties": {
                        "street": {"type": "string"},
                        "town": {"type": "string"},
                        "zip_code": {"type": "string"},
                    },
                },
                "nickname": {"type": "string"},
                "scores": {"type": "array", "items": {"bsonType": ["int", "long"]}},
                "attributes": {"type": "object"},
                "balance": {"type": "string"},
                "birthday": {"bsonType": "date"},
                "visits": {"bsonType": ["int", "long"]},
            },
        }
    }


def test_invoice_required_fields_and_identifier() -> None:
    document = MappingSchemaCreator().create_schema_for(Invoice)

    assert document.property_identifiers[0] == "_id"
    assert document.required == (
        "_id",
        "total",
        "priority",
        "tags",
        "lines",
        "colors",
        "payload",
    )
    assert "reference" not in document.required
