"""Diff engine capability."""

from collections.abc import Hashable, Sequence
from typing import Protocol, runtime_checkable

from .DiffOp import DiffOp


@runtime_checkable
class DiffEngine(Protocol):
    """Anything that turns two key sequences into an operation stream."""

    def diff(self, a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[DiffOp]:
        """Compute the operation stream between two key sequences.

        Args:
            a_keys: Comparison keys of the first sequence
            b_keys: Comparison keys of the second sequence

        Returns:
            Ordered operations covering every line of both sequences exactly once
        """
        ...
