"""Storage-only value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedId:
    """Identifier value generated by the document store on insert.

    String identifiers without an explicit storage type are persisted as this
    type, so their storage representation differs from the declared one.
    """

    value: str

    def __str__(self) -> str:
        return self.value
