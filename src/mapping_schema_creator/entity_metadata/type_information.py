"""Declared type analysis for entity properties."""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Union

from mapping_schema_creator.value_conversion.storage_types import GeneratedId

_NONE_TYPE = type(None)
_PRIMITIVE_TYPES = (int, float, bool, complex)
_NON_COLLECTION_TYPES = (str, bytes, bytearray, Mapping)
_STORAGE_VALUE_TYPES = (GeneratedId,)


@dataclass(frozen=True)
class TypeInformation:
    """Structure of a declared property type with ``Annotated`` and ``None`` removed.

    ``type`` is the runtime class of the declaration (``list`` for
    ``list[int]``). ``component`` describes collection elements or map values.
    Union declarations with several non-None members keep them in
    ``alternatives`` and report ``object`` as their type.
    """

    annotation: Any
    type: Any
    optional: bool = False
    component: TypeInformation | None = None
    alternatives: tuple[TypeInformation, ...] = ()

    @property
    def actual_type(self) -> Any:
        if self.component is not None:
            return self.component.type
        if self.is_collection_like or self.is_map:
            return object
        return self.type

    @property
    def is_map(self) -> bool:
        return _is_class(self.type) and issubclass(self.type, Mapping)

    @property
    def is_collection_like(self) -> bool:
        return (
            _is_class(self.type)
            and issubclass(self.type, Collection)
            and not issubclass(self.type, _NON_COLLECTION_TYPES)
        )

    @property
    def is_entity(self) -> bool:
        return is_entity_type(self.type)

    @property
    def is_primitive(self) -> bool:
        return not self.optional and self.annotation in _PRIMITIVE_TYPES

    @staticmethod
    def from_annotation(annotation: Any) -> TypeInformation:
        """Analyse a resolved annotation, as returned by ``typing.get_type_hints``."""
        annotation = strip_annotated(annotation)
        if annotation is Any:
            return TypeInformation(annotation=annotation, type=object)
        if typing.get_origin(annotation) in (Union, types.UnionType):
            members = typing.get_args(annotation)
            present = tuple(member for member in members if member is not _NONE_TYPE)
            optional = len(present) < len(members)
            if len(present) == 1:
                return dataclasses.replace(
                    TypeInformation.from_annotation(present[0]), optional=optional
                )
            return TypeInformation(
                annotation=annotation,
                type=object,
                optional=optional,
                alternatives=tuple(TypeInformation.from_annotation(member) for member in present),
            )

        origin = typing.get_origin(annotation)
        runtime_type = origin if origin is not None else annotation
        if not _is_class(runtime_type):
            return TypeInformation(annotation=annotation, type=object)

        information = TypeInformation(annotation=annotation, type=runtime_type)
        arguments = [argument for argument in typing.get_args(annotation) if argument is not ...]
        if information.is_map and len(arguments) == 2:
            return dataclasses.replace(
                information, component=TypeInformation.from_annotation(arguments[1])
            )
        if information.is_collection_like and arguments:
            return dataclasses.replace(
                information, component=TypeInformation.from_annotation(arguments[0])
            )
        return information


def strip_annotated(annotation: Any) -> Any:
    """Return ``annotation`` without its outer ``Annotated`` wrappers."""
    while typing.get_origin(annotation) is Annotated:
        annotation = annotation.__origin__
    return annotation


def annotated_markers(annotation: Any) -> tuple[Any, ...]:
    """Collect ``Annotated`` metadata from the annotation and its union members."""
    markers: list[Any] = []
    if typing.get_origin(annotation) is Annotated:
        markers.extend(annotation.__metadata__)
        annotation = strip_annotated(annotation)
    if typing.get_origin(annotation) in (Union, types.UnionType):
        for member in typing.get_args(annotation):
            if typing.get_origin(member) is Annotated:
                markers.extend(member.__metadata__)
    return tuple(markers)


def is_entity_type(candidate: Any) -> bool:
    """Dataclasses are entities, except value types the store writes as scalars."""
    return (
        _is_class(candidate)
        and dataclasses.is_dataclass(candidate)
        and not issubclass(candidate, _STORAGE_VALUE_TYPES)
    )


def _is_class(candidate: Any) -> bool:
    return isinstance(candidate, type)
