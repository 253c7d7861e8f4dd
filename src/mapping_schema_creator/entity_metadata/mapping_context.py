"""Mapping context describing dataclass types as persistent entities."""

from __future__ import annotations

import dataclasses
import logging
import threading
import typing
from typing import Any

from mapping_schema_creator.value_conversion.storage_types import GeneratedId

from .entity_models import MappingError, PersistentEntity, PersistentProperty
from .mapping_markers import DocumentId, FieldName, Id, Nullable, Transient
from .type_information import TypeInformation, annotated_markers, is_entity_type

logger = logging.getLogger(__name__)

ID_FIELD_NAME = "_id"
_CONVENTIONAL_ID_NAMES = ("id", "_id")


class MappingContext:
    """Describes dataclass types and caches the resulting entities.

    The cache is guarded by a lock so a single context can be shared across
    threads.
    """

    def __init__(self) -> None:
        self._entities: dict[type, PersistentEntity] = {}
        self._lock = threading.Lock()

    def describe_entity(self, entity_type: Any) -> PersistentEntity:
        """Return the persistent entity for ``entity_type``.

        Raises:
          MappingError: If the type is not a dataclass or its mapping metadata
            is inconsistent.
        """
        with self._lock:
            cached = self._entities.get(entity_type)
        if cached is not None:
            return cached

        entity = _build_entity(entity_type)
        logger.debug(
            "Described entity %s with properties %s",
            entity.name,
            [persistent_property.name for persistent_property in entity.properties],
        )
        with self._lock:
            return self._entities.setdefault(entity_type, entity)

    def describe_property_entity(self, persistent_property: PersistentProperty) -> PersistentEntity:
        """Return the entity a property nests, its element entity for collections."""
        if not is_entity_type(persistent_property.actual_type):
            raise MappingError(
                f"Property '{persistent_property.name}' does not reference an entity type."
            )
        return self.describe_entity(persistent_property.actual_type)


def _build_entity(entity_type: Any) -> PersistentEntity:
    if not is_entity_type(entity_type):
        raise MappingError(f"Cannot describe {entity_type!r}: only dataclass types are entities.")
    try:
        hints = typing.get_type_hints(entity_type, include_extras=True)
    except (NameError, TypeError) as exc:
        raise MappingError(
            f"Cannot resolve annotations of {entity_type.__qualname__}: {exc}"
        ) from exc

    declared: list[tuple[dataclasses.Field[Any], Any, tuple[Any, ...]]] = []
    for data_field in dataclasses.fields(entity_type):
        annotation = hints.get(data_field.name, data_field.type)
        markers = annotated_markers(annotation)
        if any(isinstance(marker, Transient) for marker in markers):
            continue
        declared.append((data_field, annotation, markers))

    id_name = _identifier_name(entity_type, declared)
    properties = tuple(
        _build_property(
            entity_type, data_field, annotation, markers, is_id=data_field.name == id_name
        )
        for data_field, annotation, markers in declared
    )
    id_property = next((candidate for candidate in properties if candidate.is_id), None)
    return PersistentEntity(
        type=entity_type,
        properties=properties,
        constructor_arguments=frozenset(
            data_field.name for data_field in dataclasses.fields(entity_type) if data_field.init
        ),
        id_property=id_property,
    )


def _identifier_name(
    entity_type: type, declared: list[tuple[dataclasses.Field[Any], Any, tuple[Any, ...]]]
) -> str | None:
    explicit = [
        data_field.name
        for data_field, _, markers in declared
        if any(isinstance(marker, Id) for marker in markers)
    ]
    if len(explicit) > 1:
        raise MappingError(
            f"Entity {entity_type.__qualname__} declares more than one identifier: "
            f"{', '.join(explicit)}"
        )
    if explicit:
        return explicit[0]

    conventional = [
        data_field.name for data_field, _, _ in declared if data_field.name in _CONVENTIONAL_ID_NAMES
    ]
    if len(conventional) > 1:
        raise MappingError(
            f"Entity {entity_type.__qualname__} has ambiguous identifier properties: "
            f"{', '.join(conventional)}"
        )
    return conventional[0] if conventional else None


def _build_property(
    entity_type: type,
    data_field: dataclasses.Field[Any],
    annotation: Any,
    markers: tuple[Any, ...],
    *,
    is_id: bool,
) -> PersistentProperty:
    type_information = TypeInformation.from_annotation(annotation)
    field_marker = next((marker for marker in markers if isinstance(marker, FieldName)), None)
    if field_marker is not None and not field_marker.name:
        raise MappingError(f"Property '{data_field.name}' declares an empty field name.")

    document_id = next((marker for marker in markers if isinstance(marker, DocumentId)), None)
    explicit_id_type = document_id.storage_type if document_id else None

    if is_id:
        if field_marker is not None and field_marker.name != ID_FIELD_NAME:
            raise MappingError(
                f"Identifier '{data_field.name}' of {entity_type.__qualname__} is always stored "
                f"as {ID_FIELD_NAME}, not '{field_marker.name}'."
            )
        field_name = ID_FIELD_NAME
    else:
        field_name = field_marker.name if field_marker else data_field.name

    return PersistentProperty(
        owner=entity_type,
        name=data_field.name,
        type_information=type_information,
        field_name=field_name,
        field_type=_storage_type(type_information, field_marker, is_id=is_id),
        is_id=is_id,
        nullable=type_information.optional
        or any(isinstance(marker, Nullable) for marker in markers),
        explicit_id_type=explicit_id_type,
    )


def _storage_type(
    type_information: TypeInformation, field_marker: FieldName | None, *, is_id: bool
) -> Any:
    if field_marker is not None and field_marker.target_type is not None:
        return field_marker.target_type
    if is_id and type_information.type is str:
        return GeneratedId
    return type_information.type
