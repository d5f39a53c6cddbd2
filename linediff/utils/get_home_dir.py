"""Get linediff home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get linediff home directory based on LINEDIFF_HOME or default to ~/.linediff."""
    home_env = os.environ.get("LINEDIFF_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".linediff"
