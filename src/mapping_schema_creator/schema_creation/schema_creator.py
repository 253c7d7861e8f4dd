"""Mapping-based schema creation service."""

from __future__ import annotations

import logging
from typing import Any

from mapping_schema_creator.entity_metadata.entity_models import (
    PersistentEntity,
    PersistentProperty,
)
from mapping_schema_creator.entity_metadata.mapping_context import MappingContext
from mapping_schema_creator.schema_objects.schema_models import (
    SchemaDocument,
    SchemaObject,
    SchemaProperty,
)
from mapping_schema_creator.value_conversion.value_converter import (
    DocumentValueConverter,
    ValueConverter,
)

from .property_resolver import PropertyResolver
from .schema_contracts import PotentiallyRequiredProperty, PropertyPath

logger = logging.getLogger(__name__)


class MappingSchemaCreator:
    """Creates schemas from mapping metadata and write conversions.

    Field names follow the mapping metadata and property types follow the
    converter's storage representation, so the schema matches what the
    document store actually receives.
    """

    def __init__(
        self,
        mapping_context: MappingContext | None = None,
        converter: ValueConverter | None = None,
    ) -> None:
        self._mapping_context = mapping_context or MappingContext()
        self._converter = converter or DocumentValueConverter()
        self._resolver = PropertyResolver(
            mapping_context=self._mapping_context,
            converter=self._converter,
            compute_properties=self.compute_properties,
        )

    def create_schema_for(self, entity_type: Any) -> SchemaDocument:
        """Return the schema for ``entity_type``.

        Raises:
          MappingError: If the type cannot be described as an entity.
        """
        entity = self._mapping_context.describe_entity(entity_type)
        schema_properties = self.compute_properties((), entity)
        document = SchemaDocument(
            properties=tuple(candidate.schema_property for candidate in schema_properties),
            required=tuple(
                dict.fromkeys(
                    candidate.identifier for candidate in schema_properties if candidate.required
                )
            ),
        )
        logger.debug(
            "Created schema for %s with required fields %s", entity.name, list(document.required)
        )
        return document

    def compute_properties(
        self, path: PropertyPath, entity: PersistentEntity
    ) -> tuple[PotentiallyRequiredProperty, ...]:
        """Compute schema properties of ``entity`` below the ancestor ``path``."""
        computed = (self._compute_property(path, entity, nested) for nested in entity.properties)
        return tuple(candidate for candidate in computed if candidate is not None)

    def _compute_property(
        self, path: PropertyPath, entity: PersistentEntity, nested: PersistentProperty
    ) -> PotentiallyRequiredProperty | None:
        if nested in path:
            logger.debug("Cycle guard stops at %r below %r", nested, path[-1])
            return _cycle_placeholder(path[-1])
        return self._resolver.resolve_property((*path, nested), entity)


def _cycle_placeholder(last: PersistentProperty) -> PotentiallyRequiredProperty:
    # Named after the last path element, not the recurring property.
    return PotentiallyRequiredProperty(
        schema_property=SchemaProperty.named(last.field_name, SchemaObject.of(object)),
        required=False,
    )


def create_schema_for(
    entity_type: Any,
    *,
    mapping_context: MappingContext | None = None,
    converter: ValueConverter | None = None,
) -> SchemaDocument:
    """Create a schema with a one-off creator."""
    return MappingSchemaCreator(mapping_context, converter).create_schema_for(entity_type)
