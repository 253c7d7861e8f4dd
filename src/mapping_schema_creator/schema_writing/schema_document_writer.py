"""Schema document rendering and writing service."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from mapping_schema_creator.schema_objects.schema_models import SchemaDocument


class OutputFormat(str, Enum):
    """Supported schema file formats."""

    JSON = "json"
    YAML = "yaml"


def render_schema_document(
    document: SchemaDocument,
    *,
    output_format: OutputFormat | str = OutputFormat.JSON,
    validator: bool = True,
    indent: int = 2,
) -> str:
    """Render a schema document as JSON or YAML text.

    Args:
      document: Schema to render.
      output_format: ``json`` or ``yaml``.
      validator: Wrap the schema as a ``$jsonSchema`` collection validator.
      indent: Indentation width.

    Returns:
      The rendered text, newline terminated.
    """
    resolved_format = OutputFormat(output_format)
    payload = document.to_validator() if validator else document.to_document()
    if resolved_format is OutputFormat.YAML:
        return yaml.safe_dump(
            _plain_values(payload), sort_keys=False, indent=indent, allow_unicode=True
        )
    return json.dumps(payload, indent=indent, ensure_ascii=False, default=str) + "\n"


def write_schema_document(
    document: SchemaDocument,
    output_path: Path | str,
    *,
    output_format: OutputFormat | str = OutputFormat.JSON,
    validator: bool = True,
    indent: int = 2,
) -> Path:
    """Write a rendered schema document and return the resolved destination.

    Raises:
      OSError: If writing the file fails.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(
        render_schema_document(
            document, output_format=output_format, validator=validator, indent=indent
        ),
        encoding="utf-8",
    )
    return destination.resolve()


def _plain_values(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _plain_values(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain_values(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
