"""Diff configuration error."""

from pathlib import Path


class DiffConfigError(Exception):
    """Raised when diff configuration is invalid.

    ``errors`` holds every validation message; ``source`` is the config file
    they came from, when there is one.
    """

    def __init__(self, errors: list[str] | str, source: Path | None = None):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        self.source = source
        header = "Diff configuration validation failed"
        if source is not None:
            header += f" ({source})"
        super().__init__(header + ":\n" + "\n".join(f"  - {e}" for e in self.errors))
