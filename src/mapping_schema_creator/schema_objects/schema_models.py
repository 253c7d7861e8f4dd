"""Schema document entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from .schema_types import SchemaType, schema_types_for


class SchemaDefinitionError(Exception):
    """Raised when a schema fragment violates its structural invariants."""


@dataclass(frozen=True)
class SchemaObject:
    """Schema fragment describing the accepted shape of one value."""

    types: tuple[SchemaType, ...]
    possible_values: tuple[object, ...] = ()
    properties: tuple[SchemaProperty, ...] | None = None
    required: tuple[str, ...] = ()
    items: SchemaObject | None = None

    def __post_init__(self) -> None:
        if not self.types:
            raise SchemaDefinitionError("Schema objects must accept at least one type.")
        if self.properties is not None and self.types != (SchemaType.OBJECT,):
            raise SchemaDefinitionError("Only object schemas may declare nested properties.")
        if self.required:
            if self.properties is None:
                raise SchemaDefinitionError("Required fields need nested properties.")
            _ensure_required_subset(self.required, self.properties)
        if self.items is not None and SchemaType.ARRAY not in self.types:
            raise SchemaDefinitionError("Only array schemas may declare items.")

    @staticmethod
    def of(python_type: object) -> SchemaObject:
        """Create a fragment typed after a Python type."""
        return SchemaObject(types=schema_types_for(python_type))

    @staticmethod
    def of_types(*types: SchemaType) -> SchemaObject:
        return SchemaObject(types=tuple(types))

    @staticmethod
    def object_with(
        properties: Iterable[SchemaProperty], required: Iterable[str] = ()
    ) -> SchemaObject:
        """Create an object fragment carrying nested properties."""
        return SchemaObject(
            types=(SchemaType.OBJECT,),
            properties=tuple(properties),
            required=_unique(required),
        )

    def with_possible_values(self, values: Iterable[object]) -> SchemaObject:
        return replace(self, possible_values=tuple(values))

    def with_items(self, items: SchemaObject) -> SchemaObject:
        return replace(self, items=items)

    def to_document(self) -> dict[str, Any]:
        document = _render_types(self.types)
        if self.required:
            document["required"] = list(self.required)
        if self.properties is not None:
            document["properties"] = {
                schema_property.identifier: schema_property.schema.to_document()
                for schema_property in self.properties
            }
        if self.items is not None:
            document["items"] = self.items.to_document()
        if self.possible_values:
            document["enum"] = list(self.possible_values)
        return document


@dataclass(frozen=True)
class SchemaProperty:
    """Named schema fragment as it appears in stored documents."""

    identifier: str
    schema: SchemaObject

    def __post_init__(self) -> None:
        if not self.identifier:
            raise SchemaDefinitionError("Schema property identifiers must not be empty.")

    @staticmethod
    def named(identifier: str, schema: SchemaObject) -> SchemaProperty:
        return SchemaProperty(identifier=identifier, schema=schema)

    @property
    def types(self) -> tuple[SchemaType, ...]:
        return self.schema.types

    @property
    def properties(self) -> tuple[SchemaProperty, ...] | None:
        return self.schema.properties

    @property
    def possible_values(self) -> tuple[object, ...]:
        return self.schema.possible_values

    def to_document(self) -> dict[str, Any]:
        return {self.identifier: self.schema.to_document()}


@dataclass(frozen=True)
class SchemaDocument:
    """Complete validation schema for one root type."""

    properties: tuple[SchemaProperty, ...]
    required: tuple[str, ...] = ()
    title: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        _ensure_required_subset(self.required, self.properties)

    @property
    def property_identifiers(self) -> tuple[str, ...]:
        return tuple(schema_property.identifier for schema_property in self.properties)

    def property_named(self, identifier: str) -> SchemaProperty | None:
        for schema_property in self.properties:
            if schema_property.identifier == identifier:
                return schema_property
        return None

    def to_document(self) -> dict[str, Any]:
        """Render the schema as a plain ``$jsonSchema`` body."""
        root = SchemaObject.object_with(self.properties, self.required)
        document: dict[str, Any] = {"type": SchemaType.OBJECT.type_name}
        if self.title:
            document["title"] = self.title
        if self.description:
            document["description"] = self.description
        document.update((key, value) for key, value in root.to_document().items() if key != "type")
        return document

    def to_validator(self) -> dict[str, Any]:
        """Render the schema wrapped as a collection validator."""
        return {"$jsonSchema": self.to_document()}


def _render_types(types: tuple[SchemaType, ...]) -> dict[str, Any]:
    if len(types) == 1:
        return {types[0].keyword: types[0].type_name}
    if all(schema_type.is_json_type for schema_type in types):
        return {"type": [schema_type.type_name for schema_type in types]}
    return {"bsonType": [schema_type.bson_name for schema_type in types]}


def _ensure_required_subset(
    required: tuple[str, ...], properties: tuple[SchemaProperty, ...]
) -> None:
    identifiers = {schema_property.identifier for schema_property in properties}
    missing = [identifier for identifier in required if identifier not in identifiers]
    if missing:
        raise SchemaDefinitionError(
            f"Required fields are not declared as properties: {', '.join(missing)}"
        )


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))
