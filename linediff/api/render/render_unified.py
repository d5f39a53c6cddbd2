"""Render hunks as unified diff text."""

from collections.abc import Sequence

from ..diff.Hunk import Hunk
from ._render_line import _render_line
from .render_hunk_header import render_hunk_header


def render_unified(hunks: Sequence[Hunk], label_a: str = "a", label_b: str = "b") -> str:
    """Render hunks as unified diff text.

    Args:
        hunks: Hunks from build_hunks
        label_a: Label printed on the ``---`` line
        label_b: Label printed on the ``+++`` line

    Returns:
        Unified diff text, or an empty string when there are no hunks
    """
    if not hunks:
        return ""

    parts = [f"--- {label_a}\n", f"+++ {label_b}\n"]
    for hunk in hunks:
        parts.append(render_hunk_header(hunk) + "\n")
        parts.extend(_render_line(line.kind.prefix, line.text) for line in hunk.lines)
    return "".join(parts)
