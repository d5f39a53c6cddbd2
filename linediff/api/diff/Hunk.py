"""Hunk dataclass."""

from dataclasses import dataclass, field

from .HunkLine import HunkLine


@dataclass(frozen=True)
class Hunk:
    """A context-bounded display window over one or more change runs.

    ``a_start``/``b_start`` are 1-based. When a hunk draws no line from a side,
    its start is the position of the line preceding the hunk on that side.
    """

    a_start: int
    a_len: int
    b_start: int
    b_len: int
    lines: tuple[HunkLine, ...] = field(default_factory=tuple)

    @property
    def a_end(self) -> int:
        """Last 1-based a-side position covered by the hunk."""
        return self.a_start + self.a_len - 1

    @property
    def b_end(self) -> int:
        """Last 1-based b-side position covered by the hunk."""
        return self.b_start + self.b_len - 1
