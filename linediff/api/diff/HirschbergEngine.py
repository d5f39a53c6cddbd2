"""Linear-space LCS diff engine (UNO: single class)."""

import logging
from collections.abc import Hashable, Sequence

from ._order_change_blocks import _order_change_blocks
from .DiffOp import DiffOp

logger = logging.getLogger(__name__)


class HirschbergEngine:
    """Diff engine using Hirschberg's divide-and-conquer LCS alignment.

    Same O(n*m) time as the table engine but only O(n+m) memory: each level
    keeps two rows of LCS lengths and splits the problem at the middle line
    of the first sequence.
    """

    def diff(self, a_keys: Sequence[Hashable], b_keys: Sequence[Hashable]) -> list[DiffOp]:
        """Compute the operation stream with a linear-space alignment.

        Args:
            a_keys: Comparison keys of the first sequence
            b_keys: Comparison keys of the second sequence

        Returns:
            Ordered list of DiffOp, removals before additions in every block
        """
        logger.debug("hirschberg alignment %dx%d", len(a_keys), len(b_keys))
        ops: list[DiffOp] = []
        self._align(a_keys, b_keys, 0, len(a_keys), 0, len(b_keys), ops)
        return _order_change_blocks(ops)

    def _align(
        self,
        a_keys: Sequence[Hashable],
        b_keys: Sequence[Hashable],
        a_lo: int,
        a_hi: int,
        b_lo: int,
        b_hi: int,
        ops: list[DiffOp],
    ) -> None:
        # Common prefix and suffix never need a split
        while a_lo < a_hi and b_lo < b_hi and a_keys[a_lo] == b_keys[b_lo]:
            ops.append(DiffOp.equal(a_lo, b_lo))
            a_lo += 1
            b_lo += 1
        tail: list[DiffOp] = []
        while a_lo < a_hi and b_lo < b_hi and a_keys[a_hi - 1] == b_keys[b_hi - 1]:
            a_hi -= 1
            b_hi -= 1
            tail.append(DiffOp.equal(a_hi, b_hi))

        if a_lo == a_hi:
            ops.extend(DiffOp.add(j) for j in range(b_lo, b_hi))
        elif b_lo == b_hi:
            ops.extend(DiffOp.remove(i) for i in range(a_lo, a_hi))
        elif a_hi - a_lo == 1:
            self._align_single(a_keys[a_lo], a_lo, b_keys, b_lo, b_hi, ops)
        else:
            a_mid = (a_lo + a_hi) // 2
            forward = self._lcs_lengths(a_keys, b_keys, a_lo, a_mid, b_lo, b_hi, reverse=False)
            backward = self._lcs_lengths(a_keys, b_keys, a_mid, a_hi, b_lo, b_hi, reverse=True)

            width = b_hi - b_lo
            best_split = 0
            best_score = -1
            for k in range(width + 1):
                score = forward[k] + backward[width - k]
                if score > best_score:
                    best_score = score
                    best_split = k

            b_mid = b_lo + best_split
            self._align(a_keys, b_keys, a_lo, a_mid, b_lo, b_mid, ops)
            self._align(a_keys, b_keys, a_mid, a_hi, b_mid, b_hi, ops)

        tail.reverse()
        ops.extend(tail)

    @staticmethod
    def _align_single(
        a_key: Hashable,
        a_index: int,
        b_keys: Sequence[Hashable],
        b_lo: int,
        b_hi: int,
        ops: list[DiffOp],
    ) -> None:
        """Align one a-side line against a b-side range."""
        match = None
        for j in range(b_lo, b_hi):
            if b_keys[j] == a_key:
                match = j
                break

        if match is None:
            ops.append(DiffOp.remove(a_index))
            ops.extend(DiffOp.add(j) for j in range(b_lo, b_hi))
            return

        ops.extend(DiffOp.add(j) for j in range(b_lo, match))
        ops.append(DiffOp.equal(a_index, match))
        ops.extend(DiffOp.add(j) for j in range(match + 1, b_hi))

    @staticmethod
    def _lcs_lengths(
        a_keys: Sequence[Hashable],
        b_keys: Sequence[Hashable],
        a_lo: int,
        a_hi: int,
        b_lo: int,
        b_hi: int,
        reverse: bool,
    ) -> list[int]:
        """Return the last row of LCS lengths for ``a[a_lo:a_hi]`` against prefixes of ``b[b_lo:b_hi]``.

        With ``reverse`` both ranges are walked back to front, giving lengths
        against suffixes instead.
        """
        a_range = range(a_hi - 1, a_lo - 1, -1) if reverse else range(a_lo, a_hi)
        b_range = range(b_hi - 1, b_lo - 1, -1) if reverse else range(b_lo, b_hi)
        b_seq = [b_keys[j] for j in b_range]

        previous = [0] * (len(b_seq) + 1)
        for i in a_range:
            a_key = a_keys[i]
            current = [0] * (len(b_seq) + 1)
            for j, b_key in enumerate(b_seq, start=1):
                if a_key == b_key:
                    current[j] = previous[j - 1] + 1
                else:
                    current[j] = previous[j] if previous[j] >= current[j - 1] else current[j - 1]
            previous = current
        return previous
