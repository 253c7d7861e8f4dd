"""Schema generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from mapping_schema_creator.configuration import (
    Configuration,
    ConfigurationError,
    TypeReferenceError,
    load_configuration,
    resolve_type_reference,
)
from mapping_schema_creator.entity_metadata import MappingContext, MappingError
from mapping_schema_creator.schema_creation import MappingSchemaCreator, SchemaCreator
from mapping_schema_creator.schema_objects import SchemaDefinitionError, SchemaDocument
from mapping_schema_creator.schema_writing import render_schema_document, write_schema_document
from mapping_schema_creator.value_conversion import (
    Conversion,
    DocumentValueConverter,
    ValueConverter,
)

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)

CreatorFactory = Callable[[MappingContext, ValueConverter], SchemaCreator]


class SchemaGenerationError(Exception):
    """Raised when a schema generation use case cannot be completed."""


def execute_schema_generation(
    request: GenerationRequest,
    *,
    creator_factory: CreatorFactory | None = None,
) -> GenerationOutcome:
    """Generate one schema and write or render it."""
    resolved_creator_factory = creator_factory or MappingSchemaCreator
    configuration = _load_configuration(request.config_path)
    entity_type = _resolve_entity_type(request.entity_reference, configuration)

    creator = resolved_creator_factory(MappingContext(), build_value_converter(configuration))
    try:
        document = creator.create_schema_for(entity_type)
    except (MappingError, SchemaDefinitionError) as exc:
        raise SchemaGenerationError(str(exc)) from exc
    document = _with_output_annotations(document, configuration)

    output_format = request.output_format or configuration.output.format
    validator = configuration.output.validator if request.validator is None else request.validator
    if request.output_path is None:
        rendered = render_schema_document(
            document,
            output_format=output_format,
            validator=validator,
            indent=configuration.output.indent,
        )
        return GenerationOutcome(document=document, output_path=None, rendered=rendered)

    try:
        output_path = write_schema_document(
            document,
            request.output_path,
            output_format=output_format,
            validator=validator,
            indent=configuration.output.indent,
        )
    except OSError as exc:
        raise SchemaGenerationError(f"Failed to write schema: {exc}") from exc
    logger.info("Wrote schema for %s to %s", entity_type.__qualname__, output_path)
    return GenerationOutcome(document=document, output_path=output_path, rendered=None)


def build_value_converter(configuration: Configuration) -> DocumentValueConverter:
    """Build the converter described by the configuration."""
    return DocumentValueConverter(
        (Conversion(setting.source, setting.target) for setting in configuration.conversions),
        enum_representation=configuration.enum_representation,
    )


def _load_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return Configuration(path=None)
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise SchemaGenerationError(str(exc)) from exc


def _resolve_entity_type(entity_reference: str | None, configuration: Configuration) -> type:
    if entity_reference:
        try:
            return resolve_type_reference(entity_reference)
        except TypeReferenceError as exc:
            raise SchemaGenerationError(str(exc)) from exc
    if configuration.entity is None:
        raise SchemaGenerationError(
            "No entity type given; pass --type or set 'entity' in the configuration."
        )
    return configuration.entity


def _with_output_annotations(
    document: SchemaDocument, configuration: Configuration
) -> SchemaDocument:
    output = configuration.output
    if output.title is None and output.description is None:
        return document
    return replace(document, title=output.title, description=output.description)
