"""Resolution of single entity properties into schema properties."""

from __future__ import annotations

from enum import Enum
from typing import Any, assert_never

from mapping_schema_creator.entity_metadata.entity_models import (
    PersistentEntity,
    PersistentProperty,
)
from mapping_schema_creator.entity_metadata.mapping_context import MappingContext
from mapping_schema_creator.entity_metadata.type_information import TypeInformation
from mapping_schema_creator.schema_objects.schema_models import SchemaObject, SchemaProperty
from mapping_schema_creator.schema_objects.schema_types import SchemaType, schema_types_for
from mapping_schema_creator.value_conversion.value_converter import ValueConverter

from .schema_contracts import (
    PotentiallyRequiredProperty,
    PropertiesComputation,
    PropertyKind,
    PropertyPath,
)


class PropertyResolver:
    """Turns the last property of a descent path into a schema property.

    Embedded entities recurse through ``compute_properties`` with the path
    unchanged, which keeps the caller's cycle guard in effect.
    """

    def __init__(
        self,
        *,
        mapping_context: MappingContext,
        converter: ValueConverter,
        compute_properties: PropertiesComputation,
    ) -> None:
        self._mapping_context = mapping_context
        self._converter = converter
        self._compute_properties = compute_properties

    def resolve_property(
        self, path: PropertyPath, parent_entity: PersistentEntity
    ) -> PotentiallyRequiredProperty | None:
        persistent_property = path[-1]
        required = is_required_property(parent_entity, persistent_property)
        raw_target_type = compute_target_type(persistent_property)
        target_type = self._converter.representation_type_of(raw_target_type)
        kind = classify_property(persistent_property, raw_target_type, target_type)

        if kind is PropertyKind.EMBEDDED:
            schema = self._nested_object(
                path, self._mapping_context.describe_property_entity(persistent_property)
            )
        elif kind is PropertyKind.COLLECTION:
            schema = self._array(path, persistent_property, target_type)
        elif kind is PropertyKind.MAP:
            schema = SchemaObject.of_types(SchemaType.OBJECT)
        elif kind is PropertyKind.ENUM:
            schema = self._enumeration(target_type)
        elif kind is PropertyKind.PLAIN:
            schema = self._plain(persistent_property, target_type)
        else:
            assert_never(kind)

        return PotentiallyRequiredProperty(
            schema_property=SchemaProperty.named(persistent_property.field_name, schema),
            required=required,
        )

    def _nested_object(self, path: PropertyPath, entity: PersistentEntity) -> SchemaObject:
        nested_properties = self._compute_properties(path, entity)
        return SchemaObject.object_with(
            (nested.schema_property for nested in nested_properties),
            (nested.identifier for nested in nested_properties if nested.required),
        )

    def _array(
        self, path: PropertyPath, persistent_property: PersistentProperty, target_type: Any
    ) -> SchemaObject:
        types = schema_types_for(target_type)
        if SchemaType.ARRAY not in types:
            return SchemaObject.of_types(*types, SchemaType.ARRAY)
        schema = SchemaObject.of_types(*types)
        items = self._items(path, persistent_property.type_information.component)
        return schema.with_items(items) if items is not None else schema

    def _items(self, path: PropertyPath, element: TypeInformation | None) -> SchemaObject | None:
        if element is None or (element.type is object and not element.alternatives):
            return None
        element_type = self._converter.representation_type_of(element.type)
        if element.is_entity and element.type == element_type:
            return self._nested_object(path, self._mapping_context.describe_entity(element.type))
        if element.alternatives:
            return SchemaObject.of_types(*self._alternative_types(element.alternatives))
        if _is_enum_type(element_type):
            return self._enumeration(element_type)
        return SchemaObject.of(element_type)

    def _enumeration(self, enum_type: type[Enum]) -> SchemaObject:
        possible_values = [self._converter.to_stored_form(constant) for constant in enum_type]
        inferred_type = type(possible_values[0]) if possible_values else enum_type
        return SchemaObject.of(inferred_type).with_possible_values(possible_values)

    def _plain(self, persistent_property: PersistentProperty, target_type: Any) -> SchemaObject:
        alternatives = persistent_property.type_information.alternatives
        if alternatives and target_type is object:
            return SchemaObject.of_types(*self._alternative_types(alternatives))
        return SchemaObject.of(target_type)

    def _alternative_types(self, alternatives: tuple[TypeInformation, ...]) -> list[SchemaType]:
        types: dict[SchemaType, None] = {}
        for alternative in alternatives:
            converted = self._converter.representation_type_of(alternative.type)
            types.update(dict.fromkeys(schema_types_for(converted)))
        return list(types)


def classify_property(
    persistent_property: PersistentProperty, raw_target_type: Any, target_type: Any
) -> PropertyKind:
    """Pick the schema shape for a property; earlier kinds take precedence."""
    if persistent_property.is_entity and raw_target_type == target_type:
        return PropertyKind.EMBEDDED
    if persistent_property.is_collection_like:
        return PropertyKind.COLLECTION
    if persistent_property.is_map:
        return PropertyKind.MAP
    if _is_enum_type(target_type):
        return PropertyKind.ENUM
    return PropertyKind.PLAIN


def is_required_property(
    parent_entity: PersistentEntity, persistent_property: PersistentProperty
) -> bool:
    return (
        parent_entity.is_constructor_argument(persistent_property)
        and not persistent_property.nullable
    ) or persistent_property.is_primitive


def compute_target_type(persistent_property: PersistentProperty) -> Any:
    """Return the storage type of a property before value conversion.

    Identifiers stored as a different type than declared, such as string ids
    persisted as generated ids, fall back to ``object``.
    """
    if not persistent_property.is_id:
        return persistent_property.field_type
    if persistent_property.explicit_id_type is not None:
        return persistent_property.explicit_id_type
    if persistent_property.field_type != persistent_property.type:
        return object
    return persistent_property.field_type


def _is_enum_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, Enum)
