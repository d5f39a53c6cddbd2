"""Diff module - line sequence comparison operations."""

from ._ENGINES import ENGINES
from .build_hunks import build_hunks
from .diff_lines import diff_lines
from .DiffConfig import DiffConfig
from .DiffConfigError import DiffConfigError
from .DiffEngine import DiffEngine
from .DiffOp import DiffOp
from .get_engine import get_engine
from .has_differences import has_differences
from .Hunk import Hunk
from .HunkLine import HunkLine
from .HunkLineKind import HunkLineKind
from .LineRecord import LineRecord
from .OpKind import OpKind

__all__ = [
    "ENGINES",
    "DiffConfig",
    "DiffConfigError",
    "DiffEngine",
    "DiffOp",
    "Hunk",
    "HunkLine",
    "HunkLineKind",
    "LineRecord",
    "OpKind",
    "build_hunks",
    "diff_lines",
    "get_engine",
    "has_differences",
]
