"""Diff metadata dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffMetadata:
    """Metadata describing a diff operation."""

    engine_used: str
    is_identical: bool
    label_a: str | None = None
    label_b: str | None = None
    line_count_a: int | None = None
    line_count_b: int | None = None
