"""Greedy shortest-edit-script diff engine (UNO: single class)."""

import logging
from collections.abc import Hashable, Sequence

from ._order_change_blocks import _order_change_blocks
from .DiffOp import DiffOp

logger = logging.getLogger(__name__)


class MyersEngine:
    """Text diff engine using the Myers O((n+m)*D) greedy algorithm.

    Fast when the inputs are similar (small edit distance D). Keeps one
    frontier snapshot per edit step for the backtrack, so memory grows with
    D*(n+m) on very different inputs.
    """

    def diff(self, a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[DiffOp]:
        """Compute the shortest edit script between two key sequences.

        Args:
            a_keys: Comparison keys of the first sequence
            b_keys: Comparison keys of the second sequence

        Returns:
            Ordered list of DiffOp, removals before additions in every block
        """
        trace = self._shortest_edit(a_keys, b_keys)
        logger.debug("myers edit distance %d", len(trace) - 1)
        return _order_change_blocks(self._backtrack(trace, len(a_keys), len(b_keys)))

    @staticmethod
    def _shortest_edit(a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[list[int]]:
        """Run the forward search, returning the frontier before each edit step."""
        n = len(a_keys)
        m = len(b_keys)
        max_d = n + m
        offset = max_d + 1
        frontier = [0] * (2 * max_d + 3)
        trace: list[list[int]] = []

        for d in range(max_d + 1):
            trace.append(list(frontier))
            for k in range(-d, d + 1, 2):
                if k == -d or (k != d and frontier[offset + k - 1] < frontier[offset + k + 1]):
                    x = frontier[offset + k + 1]
                else:
                    x = frontier[offset + k - 1] + 1
                y = x - k
                while x < n and y < m and a_keys[x] == b_keys[y]:
                    x += 1
                    y += 1
                frontier[offset + k] = x
                if x >= n and y >= m:
                    return trace
        return trace

    @staticmethod
    def _backtrack(trace: list[list[int]], n: int, m: int) -> list[DiffOp]:
        """Walk the recorded frontiers back from ``(n, m)`` to the origin."""
        offset = (len(trace[0]) - 3) // 2 + 1
        ops: list[DiffOp] = []
        x, y = n, m

        for d in range(len(trace) - 1, -1, -1):
            frontier = trace[d]
            k = x - y
            if k == -d or (k != d and frontier[offset + k - 1] < frontier[offset + k + 1]):
                prev_k = k + 1
            else:
                prev_k = k - 1
            prev_x = frontier[offset + prev_k]
            prev_y = prev_x - prev_k

            while x > prev_x and y > prev_y:
                x -= 1
                y -= 1
                ops.append(DiffOp.equal(x, y))

            if d > 0:
                if x == prev_x:
                    y -= 1
                    ops.append(DiffOp.add(y))
                else:
                    x -= 1
                    ops.append(DiffOp.remove(x))

        ops.reverse()
        return ops
