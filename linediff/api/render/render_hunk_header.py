"""Render a unified diff hunk header."""

from ..diff.Hunk import Hunk


def _range(start: int, length: int) -> str:
    if length == 1:
        return str(start)
    return f"{start},{length}"


def render_hunk_header(hunk: Hunk) -> str:
    """Render ``@@ -a_start,a_len +b_start,b_len @@`` (``,1`` is omitted)."""
    return f"@@ -{_range(hunk.a_start, hunk.a_len)} +{_range(hunk.b_start, hunk.b_len)} @@"
