"""Document validation schemas derived from mapped dataclass entities."""

import logging

from .entity_metadata import (
    DocumentId,
    FieldName,
    Id,
    MappingContext,
    MappingError,
    Nullable,
    Transient,
)
from .schema_creation import MappingSchemaCreator, SchemaCreator, create_schema_for
from .schema_objects import SchemaDocument, SchemaProperty, SchemaType
from .value_conversion import Conversion, DocumentValueConverter, GeneratedId

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Conversion",
    "DocumentId",
    "DocumentValueConverter",
    "FieldName",
    "GeneratedId",
    "Id",
    "MappingContext",
    "MappingError",
    "MappingSchemaCreator",
    "Nullable",
    "SchemaCreator",
    "SchemaDocument",
    "SchemaProperty",
    "SchemaType",
    "Transient",
    "create_schema_for",
]
