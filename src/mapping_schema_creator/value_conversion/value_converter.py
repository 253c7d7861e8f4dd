"""Write-side value conversion service."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Protocol


class ValueConverter(Protocol):
    """Decides how values are represented once written to the document store."""

    def representation_type_of(self, source_type: Any) -> Any:
        """Return the type a value of ``source_type`` is stored as."""

    def to_stored_form(self, value: object) -> object:
        """Return the stored form of a single value."""


class EnumRepresentation(str, Enum):
    """Stored form of enum constants."""

    NAME = "name"
    VALUE = "value"


@dataclass(frozen=True)
class Conversion:
    """Write conversion from one in-memory type to its storage type."""

    source: type
    target: type
    function: Callable[[Any], Any] | None = None

    def apply(self, value: object) -> object:
        converter = self.function or self.target
        return converter(value)


def _date_to_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


DEFAULT_CONVERSIONS: tuple[Conversion, ...] = (
    Conversion(Decimal, str),
    Conversion(date, datetime, _date_to_datetime),
    Conversion(PurePath, str),
)


class DocumentValueConverter:
    """Value converter backed by a registry of write conversions.

    Lookups walk the source type's MRO so the most specific registered
    conversion wins. Enum types only match a conversion registered for the
    enum itself, so mixin bases such as ``str`` never capture them.
    """

    def __init__(
        self,
        conversions: Iterable[Conversion] = (),
        *,
        enum_representation: EnumRepresentation | str = EnumRepresentation.NAME,
        include_defaults: bool = True,
    ) -> None:
        registered = tuple(conversions)
        if include_defaults:
            registered = DEFAULT_CONVERSIONS + registered
        self._conversions = {conversion.source: conversion for conversion in registered}
        self._enum_representation = EnumRepresentation(enum_representation)

    @property
    def enum_representation(self) -> EnumRepresentation:
        return self._enum_representation

    def representation_type_of(self, source_type: Any) -> Any:
        conversion = self._find_conversion(source_type)
        return conversion.target if conversion else source_type

    def to_stored_form(self, value: object) -> object:
        if isinstance(value, Enum):
            conversion = self._conversions.get(type(value))
            if conversion:
                return conversion.apply(value)
            if self._enum_representation is EnumRepresentation.NAME:
                return value.name
            return self.to_stored_form(value.value)
        conversion = self._find_conversion(type(value))
        return conversion.apply(value) if conversion else value

    def _find_conversion(self, source_type: Any) -> Conversion | None:
        if not isinstance(source_type, type):
            return None
        if issubclass(source_type, Enum):
            return self._conversions.get(source_type)
        for candidate in source_type.__mro__:
            conversion = self._conversions.get(candidate)
            if conversion:
                return conversion
        return None
