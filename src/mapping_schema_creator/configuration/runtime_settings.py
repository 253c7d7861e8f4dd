"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ConversionSetting:
    """Write conversion between two resolved types."""

    source: type
    target: type


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options for generated schema files."""

    format: str = "json"
    indent: int = 2
    validator: bool = True
    title: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    entity: type | None = None
    conversions: tuple[ConversionSetting, ...] = ()
    enum_representation: str = "name"
    output: OutputSettings = field(default_factory=OutputSettings)
