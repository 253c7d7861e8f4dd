"""Schema writing exports."""

from .schema_document_writer import OutputFormat, render_schema_document, write_schema_document

__all__ = [
    "OutputFormat",
    "render_schema_document",
    "write_schema_document",
]
