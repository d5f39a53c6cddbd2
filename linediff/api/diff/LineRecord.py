"""Line record dataclass."""

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class LineRecord:
    """A single input line: display text plus the key it is compared by."""

    raw: str
    key: Hashable
