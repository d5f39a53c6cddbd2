"""Diff two line record sequences."""

from collections.abc import Sequence

from .DiffEngine import DiffEngine
from .DiffOp import DiffOp
from .LcsEngine import LcsEngine
from .LineRecord import LineRecord


def diff_lines(
    a_lines: Sequence[LineRecord],
    b_lines: Sequence[LineRecord],
    engine: DiffEngine | None = None,
) -> list[DiffOp]:
    """Compute the operation stream between two line sequences.

    Only the comparison keys reach the engine; ops refer back to the lines by
    index.

    Args:
        a_lines: First sequence
        b_lines: Second sequence
        engine: Engine to use (defaults to the LCS table engine)

    Returns:
        Ordered list of DiffOp
    """
    if engine is None:
        engine = LcsEngine()
    return engine.diff([line.key for line in a_lines], [line.key for line in b_lines])
