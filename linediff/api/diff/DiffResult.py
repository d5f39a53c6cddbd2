"""Diff result dataclass."""

from dataclasses import dataclass, field
from typing import Any

from .DiffMetadata import DiffMetadata


@dataclass(frozen=True)
class DiffResult:
    """Result of a diff operation."""

    status: str
    metadata: DiffMetadata
    hunks: list[dict[str, Any]] = field(default_factory=list)
    unified_diff: str | None = None
    message: str | None = None
    error_details: dict[str, Any] | None = None
