"""Diff engine registry."""

from .DiffEngine import DiffEngine
from .HirschbergEngine import HirschbergEngine
from .LcsEngine import LcsEngine
from .MyersEngine import MyersEngine

# Registry of available engines
ENGINES: dict[str, DiffEngine] = {
    "lcs": LcsEngine(),
    "hirschberg": HirschbergEngine(),
    "myers": MyersEngine(),
}
