"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import Configuration, ConversionSetting, OutputSettings
from .type_references import TypeReferenceError, resolve_type_reference

__all__ = [
    "Configuration",
    "ConversionSetting",
    "OutputSettings",
    "ConfigurationError",
    "load_configuration",
    "TypeReferenceError",
    "resolve_type_reference",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
