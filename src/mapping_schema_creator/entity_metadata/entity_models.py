"""Persistent entity description entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .type_information import TypeInformation


class MappingError(Exception):
    """Raised when a type cannot be described as a persistent entity."""


@dataclass(frozen=True)
class PersistentProperty:  # pylint: disable=too-many-instance-attributes
    """Mapped property of a persistent entity.

    Equality and hashing use the owning type and declared name only, so a
    property is recognised when it recurs on a descent path while two sibling
    properties of the same type stay distinct.
    """

    owner: type
    name: str
    type_information: TypeInformation = field(compare=False)
    field_name: str = field(compare=False)
    field_type: Any = field(compare=False)
    is_id: bool = field(default=False, compare=False)
    nullable: bool = field(default=False, compare=False)
    explicit_id_type: Any | None = field(default=None, compare=False)

    @property
    def type(self) -> Any:
        return self.type_information.type

    @property
    def actual_type(self) -> Any:
        return self.type_information.actual_type

    @property
    def is_entity(self) -> bool:
        return self.type_information.is_entity

    @property
    def is_collection_like(self) -> bool:
        return self.type_information.is_collection_like

    @property
    def is_map(self) -> bool:
        return self.type_information.is_map

    @property
    def is_primitive(self) -> bool:
        return self.type_information.is_primitive

    def __repr__(self) -> str:
        return f"PersistentProperty({self.owner.__qualname__}.{self.name})"


@dataclass(frozen=True)
class PersistentEntity:
    """Description of one persistent domain type."""

    type: type
    properties: tuple[PersistentProperty, ...]
    constructor_arguments: frozenset[str]
    id_property: PersistentProperty | None = None

    @property
    def name(self) -> str:
        return self.type.__qualname__

    def is_constructor_argument(self, persistent_property: PersistentProperty) -> bool:
        if persistent_property.owner is not self.type:
            raise MappingError(
                f"Property '{persistent_property.name}' is not declared by entity {self.name}."
            )
        return persistent_property.name in self.constructor_arguments

    def property_named(self, name: str) -> PersistentProperty | None:
        for persistent_property in self.properties:
            if persistent_property.name == name:
                return persistent_property
        return None
