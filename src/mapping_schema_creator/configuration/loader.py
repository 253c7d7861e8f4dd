"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, ConversionSetting, OutputSettings
from .type_references import TypeReferenceError, resolve_type_reference

_OUTPUT_FORMATS = ("json", "yaml")
_ENUM_REPRESENTATIONS = ("name", "value")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    entity_reference = _optional_string(parsed.get("entity"), "entity")
    entity = _resolve_type(entity_reference, "entity") if entity_reference else None

    return Configuration(
        path=path,
        entity=entity,
        conversions=_parse_conversions_section(parsed.get("conversions")),
        enum_representation=_parse_choice(
            parsed.get("enum_representation", "name"),
            "enum_representation",
            _ENUM_REPRESENTATIONS,
        ),
        output=_parse_output_section(parsed.get("output")),
    )


def _parse_conversions_section(value: Any) -> tuple[ConversionSetting, ...]:
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise ConfigurationError("conversions must be a mapping of source to target types.")
    conversions = []
    for source, target in value.items():
        source_reference = _require_non_empty_string(source, "conversions source")
        target_reference = _require_non_empty_string(
            target, f"conversions.{source_reference}"
        )
        conversions.append(
            ConversionSetting(
                source=_resolve_type(source_reference, "conversions source"),
                target=_resolve_type(target_reference, f"conversions.{source_reference}"),
            )
        )
    return tuple(conversions)


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    validator = section.get("validator", True)
    if not isinstance(validator, bool):
        raise ConfigurationError("output.validator must be a boolean.")
    return OutputSettings(
        format=_parse_choice(section.get("format", "json"), "output.format", _OUTPUT_FORMATS),
        indent=_require_positive_int(section.get("indent", 2), "output.indent"),
        validator=validator,
        title=_optional_string(section.get("title"), "output.title"),
        description=_optional_string(section.get("description"), "output.description"),
    )


def _parse_choice(value: Any, field_name: str, choices: tuple[str, ...]) -> str:
    normalized = _require_non_empty_string(value, field_name).lower()
    if normalized not in choices:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(choices)}.")
    return normalized


def _resolve_type(reference: str, field_name: str) -> type:
    try:
        return resolve_type_reference(reference)
    except TypeReferenceError as exc:
        raise ConfigurationError(f"{field_name}: {exc}") from exc


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
