"""Read a diff target as text."""

import sys
from pathlib import Path

_SNIFF_BYTES = 8192


def read_text(target: str) -> str:
    """Read a file, or standard input for ``-``, as UTF-8 text.

    Args:
        target: File path or ``-``

    Returns:
        Decoded text with line terminators untouched

    Raises:
        FileNotFoundError: If the file does not exist
        IsADirectoryError: If the target is a directory
        ValueError: If the content is binary or not valid UTF-8
    """
    if target == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(target).expanduser().read_bytes()

    # Check for null bytes (binary indicator)
    if b"\x00" in data[:_SNIFF_BYTES]:
        raise ValueError(f"{target} is not a text file")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"{target} is not a text file or has unsupported encoding") from exc
