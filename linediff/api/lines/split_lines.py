"""Split text into lines."""


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, keeping each line's terminator.

    A trailing fragment without a terminator is its own last line. Only
    ``\\n`` ends a line, so a ``\\r`` before it stays part of the line.
    """
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines
