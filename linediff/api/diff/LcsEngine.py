"""Longest-common-subsequence diff engine (UNO: single class)."""

import logging
from collections.abc import Hashable, Sequence

from .DiffOp import DiffOp

logger = logging.getLogger(__name__)


class LcsEngine:
    """Text diff engine using the full dynamic-programming LCS table.

    Uses O(n*m) time and memory. Callers diffing large inputs should guard the
    size or pick the ``hirschberg`` engine.
    """

    def diff(self, a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[DiffOp]:
        """Compute the operation stream by backtracking through the LCS table.

        On equal keys the diagonal step is always taken. When both other steps
        keep the same length the step left (an addition) is taken first, so the
        forward stream lists a block's removals before its additions.

        Args:
            a_keys: Comparison keys of the first sequence
            b_keys: Comparison keys of the second sequence

        Returns:
            Ordered list of DiffOp
        """
        n = len(a_keys)
        m = len(b_keys)
        logger.debug("lcs table %dx%d", n + 1, m + 1)

        table = self._build_table(a_keys, b_keys)

        ops: list[DiffOp] = []
        i, j = n, m
        while i > 0 and j > 0:
            if a_keys[i - 1] == b_keys[j - 1]:
                ops.append(DiffOp.equal(i - 1, j - 1))
                i -= 1
                j -= 1
            elif table[i - 1][j] > table[i][j - 1]:
                ops.append(DiffOp.remove(i - 1))
                i -= 1
            else:
                ops.append(DiffOp.add(j - 1))
                j -= 1

        while j > 0:
            ops.append(DiffOp.add(j - 1))
            j -= 1
        while i > 0:
            ops.append(DiffOp.remove(i - 1))
            i -= 1

        ops.reverse()
        return ops

    @staticmethod
    def _build_table(a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[list[int]]:
        """Build ``table[i][j]``, the LCS length of ``a_keys[:i]`` and ``b_keys[:j]``."""
        m = len(b_keys)
        table = [[0] * (m + 1)]
        for a_key in a_keys:
            above = table[-1]
            row = [0] * (m + 1)
            for j, b_key in enumerate(b_keys, start=1):
                if a_key == b_key:
                    row[j] = above[j - 1] + 1
                else:
                    row[j] = above[j] if above[j] >= row[j - 1] else row[j - 1]
            table.append(row)
        return table
