"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema generation configuration for mapping-schema-creator.
# Replace every <REQUIRED> placeholder before running generate-schema.
# Remove <OPTIONAL> entries your setup does not need.

# Root entity as "module.path:ClassName". --type on the command line overrides it.
entity: "<REQUIRED>"

# Extra write conversions, source type to storage type.
conversions:
  # "decimal.Decimal": "str"
  # "my_app.model:Money": "float"

# Stored form of enum constants: name or value.
enum_representation: name

output:
  # json or yaml
  format: json
  indent: 2
  # Wrap the schema as a {"$jsonSchema": ...} collection validator.
  validator: true
  title: "<OPTIONAL>"
  description: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
