"""Build line records from raw lines."""

from collections.abc import Iterable

from ..diff.LineRecord import LineRecord
from .normalize_key import normalize_key


def pair_lines(
    texts: Iterable[str],
    ignore_case: bool = False,
    ignore_trailing_whitespace: bool = False,
    ignore_eol: bool = False,
) -> list[LineRecord]:
    """Pair each raw line with its normalized comparison key."""
    return [
        LineRecord(
            raw=text,
            key=normalize_key(
                text,
                ignore_case=ignore_case,
                ignore_trailing_whitespace=ignore_trailing_whitespace,
                ignore_eol=ignore_eol,
            ),
        )
        for text in texts
    ]
