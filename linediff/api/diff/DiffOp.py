"""Diff operation dataclass (UNO: single model)."""

from dataclasses import dataclass

from .OpKind import OpKind


@dataclass(frozen=True)
class DiffOp:
    """One step of an edit script.

    Indices are 0-based positions in the caller's sequences. ``EQUAL`` carries
    both, ``REMOVE`` only ``a_index`` and ``ADD`` only ``b_index``.
    """

    kind: OpKind
    a_index: int | None = None
    b_index: int | None = None

    @classmethod
    def equal(cls, a_index: int, b_index: int) -> "DiffOp":
        return cls(OpKind.EQUAL, a_index, b_index)

    @classmethod
    def add(cls, b_index: int) -> "DiffOp":
        return cls(OpKind.ADD, None, b_index)

    @classmethod
    def remove(cls, a_index: int) -> "DiffOp":
        return cls(OpKind.REMOVE, a_index, None)

    @property
    def is_change(self) -> bool:
        return self.kind is not OpKind.EQUAL
