"""Derive the comparison key of a line."""


def normalize_key(
    raw: str,
    ignore_case: bool = False,
    ignore_trailing_whitespace: bool = False,
    ignore_eol: bool = False,
) -> str:
    """Normalize a raw line into the key the diff engine compares.

    Args:
        raw: Line text including its terminator
        ignore_case: Casefold the key
        ignore_trailing_whitespace: Strip all trailing whitespace, terminator included
        ignore_eol: Strip a trailing ``\\r\\n`` or ``\\n``

    Returns:
        Comparison key
    """
    key = raw
    if ignore_trailing_whitespace:
        key = key.rstrip()
    elif ignore_eol:
        if key.endswith("\r\n"):
            key = key[:-2]
        elif key.endswith("\n"):
            key = key[:-1]
    if ignore_case:
        key = key.casefold()
    return key
