"""Render a single prefixed diff line."""

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def _render_line(prefix: str, raw: str) -> str:
    """Prefix a raw line, flagging a missing terminator the way unified diffs do."""
    if raw.endswith("\n"):
        return f"{prefix}{raw}"
    return f"{prefix}{raw}\n{NO_NEWLINE_MARKER}\n"
