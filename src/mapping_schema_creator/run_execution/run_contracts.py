"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mapping_schema_creator.schema_objects.schema_models import SchemaDocument


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one schema.

    Values left as ``None`` fall back to the configuration file.
    """

    config_path: str | None = None
    entity_reference: str | None = None
    output_path: str | None = None
    output_format: str | None = None
    validator: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation.

    ``rendered`` holds the schema text when no output path was requested.
    """

    document: SchemaDocument
    output_path: Path | None
    rendered: str | None
