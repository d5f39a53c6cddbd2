"""Render module - diff text output."""

from ._render_line import NO_NEWLINE_MARKER
from .render_hunk_header import render_hunk_header
from .render_ops import render_ops
from .render_unified import render_unified

__all__ = [
    "NO_NEWLINE_MARKER",
    "render_hunk_header",
    "render_ops",
    "render_unified",
]
