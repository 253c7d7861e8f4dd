"""Schema creation contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from mapping_schema_creator.entity_metadata.entity_models import (
    PersistentEntity,
    PersistentProperty,
)
from mapping_schema_creator.schema_objects.schema_models import SchemaDocument, SchemaProperty

PropertyPath = tuple[PersistentProperty, ...]


class SchemaCreator(Protocol):
    """Creates validation schemas for domain types."""

    def create_schema_for(self, entity_type: Any) -> SchemaDocument:
        """Return the schema document describing stored instances of ``entity_type``."""


class PropertyKind(str, Enum):
    """Schema shape chosen for one property, in decision order."""

    EMBEDDED = "embedded"
    COLLECTION = "collection"
    MAP = "map"
    ENUM = "enum"
    PLAIN = "plain"


@dataclass(frozen=True)
class PotentiallyRequiredProperty:
    """Schema property tagged with whether its field must be present."""

    schema_property: SchemaProperty
    required: bool

    @property
    def identifier(self) -> str:
        return self.schema_property.identifier


PropertiesComputation = Callable[
    [PropertyPath, PersistentEntity], tuple[PotentiallyRequiredProperty, ...]
]
