"""Utility helpers."""

from .configure_logging import configure_logging
from .get_home_dir import get_home_dir

__all__ = ["configure_logging", "get_home_dir"]
