"""Operation kind enum."""

from enum import Enum


class OpKind(str, Enum):
    """Kind of a single edit operation."""

    EQUAL = "equal"
    ADD = "add"
    REMOVE = "remove"
