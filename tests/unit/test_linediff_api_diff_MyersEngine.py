"""Unit tests for linediff.api.diff.MyersEngine module."""

import pytest

from linediff.api.diff.DiffOp import DiffOp
from linediff.api.diff.MyersEngine import MyersEngine
from linediff.api.diff.OpKind import OpKind

pytestmark = pytest.mark.unit


class TestMyersEngine:
    """Test MyersEngine class."""

    def test_diff_identical(self):
        ops = MyersEngine().diff(["hello", "world"], ["hello", "world"])
        assert ops == [DiffOp.equal(0, 0), DiffOp.equal(1, 1)]

    def test_diff_different(self):
        ops = MyersEngine().diff(["hello", "world"], ["hello", "universe"])
        assert ops == [DiffOp.equal(0, 0), DiffOp.remove(1), DiffOp.add(1)]

    def test_trace_length_is_edit_distance(self):
        trace = MyersEngine._shortest_edit(["a", "b", "c"], ["a", "x", "c"])
        assert len(trace) - 1 == 2

    def test_trace_for_identical_input_has_one_step(self):
        trace = MyersEngine._shortest_edit(["a", "b"], ["a", "b"])
        assert len(trace) == 1

    def test_edit_count_is_minimal(self):
        a = list("abcabba")
        b = list("cbabac")
        ops = MyersEngine().diff(a, b)
        assert sum(op.kind is not OpKind.EQUAL for op in ops) == 5

    def test_empty_inputs(self):
        assert MyersEngine().diff([], []) == []
        assert MyersEngine().diff(["a"], []) == [DiffOp.remove(0)]
        assert MyersEngine().diff([], ["a"]) == [DiffOp.add(0)]
