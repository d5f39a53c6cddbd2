"""Difference summary helper."""

from collections.abc import Iterable

from .DiffOp import DiffOp


def has_differences(ops: Iterable[DiffOp]) -> bool:
    """Return True if the stream contains at least one addition or removal."""
    return any(op.is_change for op in ops)
