"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back to its caller.

    1. ``announce``: shown before any work starts.
    2. ``progress_callback``: generator doing the work, yielding
       ``(fraction, message)`` pairs; it fills in the remaining fields.
    3. ``result``: one-line summary such as "Files differ (2 hunks)".
    4. ``output``: the structured result dict; ``success`` tells whether it
       describes a completed diff or a failure.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
