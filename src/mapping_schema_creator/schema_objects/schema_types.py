"""Schema type vocabulary and Python type mapping."""

from __future__ import annotations

import re
import typing
from collections.abc import Collection, Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID

from mapping_schema_creator.value_conversion.storage_types import GeneratedId


class SchemaType(Enum):
    """Types a schema fragment may accept.

    Each member carries the keyword it renders under, its name for that
    keyword, and its name when several types are listed under ``bsonType``.
    """

    OBJECT = ("type", "object", "object")
    ARRAY = ("type", "array", "array")
    STRING = ("type", "string", "string")
    BOOLEAN = ("type", "boolean", "bool")
    NUMBER = ("type", "number", "number")
    NULL = ("type", "null", "null")
    INT = ("bsonType", "int", "int")
    LONG = ("bsonType", "long", "long")
    DOUBLE = ("bsonType", "double", "double")
    DECIMAL = ("bsonType", "decimal", "decimal")
    DATE = ("bsonType", "date", "date")
    TIMESTAMP = ("bsonType", "timestamp", "timestamp")
    BINARY = ("bsonType", "binData", "binData")
    OBJECT_ID = ("bsonType", "objectId", "objectId")
    REGEX = ("bsonType", "regex", "regex")

    def __init__(self, keyword: str, type_name: str, bson_name: str) -> None:
        self.keyword = keyword
        self.type_name = type_name
        self.bson_name = bson_name

    @property
    def is_json_type(self) -> bool:
        return self.keyword == "type"


# bool before int: bool is an int subclass.
_SIMPLE_TYPE_MAPPING: tuple[tuple[type, tuple[SchemaType, ...]], ...] = (
    (bool, (SchemaType.BOOLEAN,)),
    (int, (SchemaType.INT, SchemaType.LONG)),
    (float, (SchemaType.DOUBLE,)),
    (Decimal, (SchemaType.DECIMAL,)),
    (str, (SchemaType.STRING,)),
    (date, (SchemaType.DATE,)),
    (bytes, (SchemaType.BINARY,)),
    (bytearray, (SchemaType.BINARY,)),
    (UUID, (SchemaType.BINARY,)),
    (GeneratedId, (SchemaType.OBJECT_ID,)),
    (re.Pattern, (SchemaType.REGEX,)),
    (type(None), (SchemaType.NULL,)),
)


def schema_types_for(python_type: object) -> tuple[SchemaType, ...]:
    """Return the schema types accepting values of ``python_type``."""
    candidate = typing.get_origin(python_type) or python_type
    if candidate is typing.Any or not isinstance(candidate, type) or candidate is object:
        return (SchemaType.OBJECT,)
    if issubclass(candidate, Enum) and not issubclass(candidate, (str, int, float)):
        return (SchemaType.OBJECT,)

    for simple_type, schema_types in _SIMPLE_TYPE_MAPPING:
        if issubclass(candidate, simple_type):
            return schema_types

    if issubclass(candidate, Mapping):
        return (SchemaType.OBJECT,)
    if issubclass(candidate, Collection):
        return (SchemaType.ARRAY,)
    return (SchemaType.OBJECT,)
