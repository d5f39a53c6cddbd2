"""Hunk line kind enum."""

from enum import Enum


class HunkLineKind(str, Enum):
    """Kind of a line shown inside a hunk."""

    CONTEXT = "context"
    ADD = "add"
    REMOVE = "remove"

    @property
    def prefix(self) -> str:
        """Unified diff prefix character."""
        return {"context": " ", "add": "+", "remove": "-"}[self.value]
