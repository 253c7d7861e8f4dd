"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from mapping_schema_creator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from mapping_schema_creator.run_execution import (
    GenerationRequest,
    SchemaGenerationError,
    execute_schema_generation,
)
from mapping_schema_creator.schema_writing import OutputFormat


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mapping-schema-creator")
def cli() -> None:
    """Document validation schema generator for mapped dataclass entities."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML schema configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML schema configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-schema")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema configuration file",
)
@click.option(
    "--type",
    "entity_reference",
    required=False,
    help="Root entity as module.path:ClassName, overrides the configured entity",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the schema file to write; prints to stdout when omitted",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([member.value for member in OutputFormat]),
    help="Schema file format, overrides the configured format",
)
@click.option(
    "--validator/--no-validator",
    default=None,
    help="Wrap the schema as a $jsonSchema collection validator",
)
@click.option("--verbose", is_flag=True, default=False, help="Log schema creation details.")
def generate_schema(
    config_path: str | None,
    entity_reference: str | None,
    output_path: str | None,
    output_format: str | None,
    validator: bool | None,
    verbose: bool,
) -> None:
    """Generate the validation schema of one entity type."""
    if verbose:
        _enable_debug_logging()
    try:
        outcome = execute_schema_generation(
            GenerationRequest(
                config_path=config_path,
                entity_reference=entity_reference,
                output_path=output_path,
                output_format=output_format,
                validator=validator,
            )
        )
    except SchemaGenerationError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(outcome.rendered, nl=False)


def _enable_debug_logging() -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("mapping_schema_creator")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
