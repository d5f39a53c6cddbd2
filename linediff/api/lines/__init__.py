"""Lines module - turning raw text into line records."""

from .normalize_key import normalize_key
from .pair_lines import pair_lines
from .read_text import read_text
from .split_lines import split_lines

__all__ = [
    "normalize_key",
    "pair_lines",
    "read_text",
    "split_lines",
]
