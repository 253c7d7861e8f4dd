"""Run execution domain exports."""

from .run_contracts import GenerationOutcome, GenerationRequest
from .schema_generation_use_case import (
    SchemaGenerationError,
    build_value_converter,
    execute_schema_generation,
)

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "SchemaGenerationError",
    "build_value_converter",
    "execute_schema_generation",
]
