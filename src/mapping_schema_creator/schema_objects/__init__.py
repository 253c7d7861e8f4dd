"""Schema object exports."""

from .schema_models import SchemaDefinitionError, SchemaDocument, SchemaObject, SchemaProperty
from .schema_types import SchemaType, schema_types_for

__all__ = [
    "SchemaDefinitionError",
    "SchemaDocument",
    "SchemaObject",
    "SchemaProperty",
    "SchemaType",
    "schema_types_for",
]
