"""Look up a diff engine by name."""

from ._ENGINES import ENGINES
from .DiffEngine import DiffEngine


def get_engine(name: str) -> DiffEngine | None:
    """Return the registered engine for ``name`` ("lcs", "hirschberg" or "myers").

    Names are matched case-insensitively. Unknown names give ``None`` so the
    caller decides how to report them.
    """
    return ENGINES.get(name.strip().lower())
