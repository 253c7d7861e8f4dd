"""Value conversion exports."""

from .storage_types import GeneratedId
from .value_converter import (
    DEFAULT_CONVERSIONS,
    Conversion,
    DocumentValueConverter,
    EnumRepresentation,
    ValueConverter,
)

__all__ = [
    "Conversion",
    "DEFAULT_CONVERSIONS",
    "DocumentValueConverter",
    "EnumRepresentation",
    "GeneratedId",
    "ValueConverter",
]
