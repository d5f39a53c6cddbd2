"""linediff - line-oriented diff engine and unified diff tool."""

from .api.diff import (
    ENGINES,
    DiffOp,
    Hunk,
    HunkLine,
    HunkLineKind,
    LineRecord,
    OpKind,
    build_hunks,
    diff_lines,
    get_engine,
    has_differences,
)

__version__ = "0.1.0"

__all__ = [
    "ENGINES",
    "DiffOp",
    "Hunk",
    "HunkLine",
    "HunkLineKind",
    "LineRecord",
    "OpKind",
    "__version__",
    "build_hunks",
    "diff_lines",
    "get_engine",
    "has_differences",
]
