"""Schema creation exports."""

from .property_resolver import PropertyResolver, classify_property
from .schema_contracts import (
    PotentiallyRequiredProperty,
    PropertyKind,
    PropertyPath,
    SchemaCreator,
)
from .schema_creator import MappingSchemaCreator, create_schema_for

__all__ = [
    "MappingSchemaCreator",
    "PotentiallyRequiredProperty",
    "PropertyKind",
    "PropertyPath",
    "PropertyResolver",
    "SchemaCreator",
    "classify_property",
    "create_schema_for",
]
