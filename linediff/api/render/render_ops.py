"""Render a full operation stream without hunks."""

from collections.abc import Sequence

from ..diff.DiffOp import DiffOp
from ..diff.LineRecord import LineRecord
from ..diff.OpKind import OpKind
from ._render_line import _render_line


def render_ops(ops: Sequence[DiffOp], a_lines: Sequence[LineRecord], b_lines: Sequence[LineRecord]) -> str:
    """Render every op of the stream with a ``' '``, ``-`` or ``+`` prefix."""
    parts = []
    for op in ops:
        if op.kind is OpKind.EQUAL:
            parts.append(_render_line(" ", a_lines[op.a_index].raw))
        elif op.kind is OpKind.REMOVE:
            parts.append(_render_line("-", a_lines[op.a_index].raw))
        else:
            parts.append(_render_line("+", b_lines[op.b_index].raw))
    return "".join(parts)
