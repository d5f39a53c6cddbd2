"""Reorder change blocks so removals precede additions."""

from .DiffOp import DiffOp
from .OpKind import OpKind


def _order_change_blocks(ops: list[DiffOp]) -> list[DiffOp]:
    """Return ``ops`` with each run of non-equal ops listed removals first.

    Reordering inside a run keeps both sides in their original order, so the
    stream still reconstructs both sequences.
    """
    ordered: list[DiffOp] = []
    removes: list[DiffOp] = []
    adds: list[DiffOp] = []
    for op in ops:
        if op.kind is OpKind.REMOVE:
            removes.append(op)
        elif op.kind is OpKind.ADD:
            adds.append(op)
        else:
            ordered.extend(removes)
            ordered.extend(adds)
            removes.clear()
            adds.clear()
            ordered.append(op)
    ordered.extend(removes)
    ordered.extend(adds)
    return ordered
