"""Mapping metadata markers attached to entity annotations.

Markers are placed inside ``typing.Annotated``::

    @dataclass
    class Person:
        id: Annotated[str, DocumentId(str)]
        internal_name: Annotated[str, FieldName("ext_name")]
        nickname: Annotated[str, Nullable()]
        cache_key: Annotated[str, Transient()] = ""
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldName:
    """Storage field name, optionally with an explicit storage field type."""

    name: str
    target_type: Any | None = None


@dataclass(frozen=True)
class Transient:
    """Property is never written to the document store."""


@dataclass(frozen=True)
class Id:
    """Property is the entity identifier."""


@dataclass(frozen=True)
class DocumentId(Id):
    """Identifier stored with an explicit storage type."""

    storage_type: Any = None


@dataclass(frozen=True)
class Nullable:
    """Property may be absent or null even when passed to the constructor."""

