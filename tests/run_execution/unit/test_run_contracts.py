"""Tests for run execution domain entities."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from mapping_schema_creator.run_execution.run_contracts import GenerationOutcome, GenerationRequest
from mapping_schema_creator.schema_objects import SchemaDocument


def test_generation_request_defers_to_configuration_by_default() -> None:
    request = GenerationRequest()

    assert request.config_path is None
    assert request.entity_reference is None
    assert request.output_format is None
    assert request.validator is None


def test_generation_outcome_is_immutable() -> None:
    outcome = GenerationOutcome(
        document=SchemaDocument(properties=()),
        output_path=Path("/tmp/schema.json"),
        rendered=None,
    )

    assert outcome.output_path is not None
    assert outcome.output_path.name == "schema.json"
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.rendered = "{}"  # type: ignore[misc]
