"""Group an operation stream into context-bounded hunks."""

import logging
from collections.abc import Sequence

from .DiffOp import DiffOp
from .Hunk import Hunk
from .HunkLine import HunkLine
from .HunkLineKind import HunkLineKind
from .LineRecord import LineRecord
from .OpKind import OpKind

logger = logging.getLogger(__name__)


def build_hunks(
    ops: Sequence[DiffOp],
    a_lines: Sequence[LineRecord],
    b_lines: Sequence[LineRecord],
    context_lines: int,
) -> list[Hunk]:
    """Group the operation stream into hunks for context-style display.

    Change runs separated by at most ``2 * context_lines`` equal lines share a
    hunk, since their context windows would touch or overlap. Each hunk then
    extends up to ``context_lines`` equal lines on either side, clipped at the
    ends of the stream.

    Args:
        ops: Operation stream, as produced by a diff engine over the two sequences
        a_lines: First sequence (resolves ``a_index`` references)
        b_lines: Second sequence (resolves ``b_index`` references)
        context_lines: Number of unchanged lines to show around each change

    Returns:
        Hunks in ascending position order

    Raises:
        ValueError: If context_lines is not a non-negative int
    """
    if isinstance(context_lines, bool) or not isinstance(context_lines, int) or context_lines < 0:
        raise ValueError(f"context_lines must be a non-negative int (found: {context_lines!r})")

    groups: list[list[int]] = []
    for position, op in enumerate(ops):
        if not op.is_change:
            continue
        if groups and position - groups[-1][1] - 1 <= 2 * context_lines:
            groups[-1][1] = position
        else:
            groups.append([position, position])

    if not groups:
        return []

    # Lines consumed from each side before every op
    a_before: list[int] = []
    b_before: list[int] = []
    a_count = b_count = 0
    for op in ops:
        a_before.append(a_count)
        b_before.append(b_count)
        if op.kind is not OpKind.ADD:
            a_count += 1
        if op.kind is not OpKind.REMOVE:
            b_count += 1

    hunks = []
    for first, last in groups:
        start = max(0, first - context_lines)
        end = min(len(ops) - 1, last + context_lines)
        hunks.append(_make_hunk(ops, start, end, a_before[start], b_before[start], a_lines, b_lines))

    logger.debug("built %d hunks from %d ops (context %d)", len(hunks), len(ops), context_lines)
    return hunks


def _make_hunk(
    ops: Sequence[DiffOp],
    start: int,
    end: int,
    a_offset: int,
    b_offset: int,
    a_lines: Sequence[LineRecord],
    b_lines: Sequence[LineRecord],
) -> Hunk:
    lines: list[HunkLine] = []
    a_len = b_len = 0
    for op in ops[start : end + 1]:
        if op.kind is OpKind.EQUAL:
            lines.append(HunkLine(HunkLineKind.CONTEXT, a_lines[op.a_index].raw, op.a_index, op.b_index))
            a_len += 1
            b_len += 1
        elif op.kind is OpKind.REMOVE:
            lines.append(HunkLine(HunkLineKind.REMOVE, a_lines[op.a_index].raw, op.a_index, None))
            a_len += 1
        else:
            lines.append(HunkLine(HunkLineKind.ADD, b_lines[op.b_index].raw, None, op.b_index))
            b_len += 1

    # An empty side points at the line just before the hunk
    return Hunk(
        a_start=a_offset + 1 if a_len else a_offset,
        a_len=a_len,
        b_start=b_offset + 1 if b_len else b_offset,
        b_len=b_len,
        lines=tuple(lines),
    )
