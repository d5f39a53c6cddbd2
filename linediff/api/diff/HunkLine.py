"""Hunk line dataclass."""

from dataclasses import dataclass

from .HunkLineKind import HunkLineKind


@dataclass(frozen=True)
class HunkLine:
    """A line inside a hunk with the raw text of the line it references."""

    kind: HunkLineKind
    text: str
    a_index: int | None = None
    b_index: int | None = None
