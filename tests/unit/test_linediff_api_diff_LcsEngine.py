"""Unit tests for linediff.api.diff.LcsEngine module."""

import pytest

from linediff.api.diff.DiffOp import DiffOp
from linediff.api.diff.LcsEngine import LcsEngine
from linediff.api.diff.OpKind import OpKind

pytestmark = pytest.mark.unit


class TestLcsEngine:
    """Test LcsEngine class."""

    def test_single_substitution(self):
        ops = LcsEngine().diff(["a", "b", "c"], ["a", "x", "c"])
        assert ops == [
            DiffOp.equal(0, 0),
            DiffOp.remove(1),
            DiffOp.add(1),
            DiffOp.equal(2, 2),
        ]

    def test_both_empty(self):
        assert LcsEngine().diff([], []) == []

    def test_first_empty_is_all_adds(self):
        ops = LcsEngine().diff([], ["x", "y"])
        assert ops == [DiffOp.add(0), DiffOp.add(1)]

    def test_second_empty_is_all_removes(self):
        ops = LcsEngine().diff(["x", "y"], [])
        assert ops == [DiffOp.remove(0), DiffOp.remove(1)]

    def test_identical_is_all_equal(self):
        keys = ["a", "b", "a", "c"]
        ops = LcsEngine().diff(keys, list(keys))
        assert ops == [DiffOp.equal(i, i) for i in range(4)]

    def test_disjoint_block_lists_removes_first(self):
        ops = LcsEngine().diff(["p", "q"], ["x", "y"])
        assert [op.kind for op in ops] == [OpKind.REMOVE, OpKind.REMOVE, OpKind.ADD, OpKind.ADD]
        assert ops == [DiffOp.remove(0), DiffOp.remove(1), DiffOp.add(0), DiffOp.add(1)]

    def test_duplicate_keys_match_last_occurrence(self):
        """Backtracking from the end binds a match to the latest equal key."""
        ops = LcsEngine().diff(["a", "b", "a"], ["a"])
        assert ops == [DiffOp.remove(0), DiffOp.remove(1), DiffOp.equal(2, 0)]

    def test_duplicate_keys_are_deterministic(self):
        a = ["x", "x", "y", "x"]
        b = ["x", "y", "x", "x"]
        first = LcsEngine().diff(a, b)
        second = LcsEngine().diff(list(a), list(b))
        assert first == second
        assert sum(op.kind is OpKind.EQUAL for op in first) == 3

    def test_insertion_in_middle(self):
        ops = LcsEngine().diff(["a", "c"], ["a", "b", "c"])
        assert ops == [DiffOp.equal(0, 0), DiffOp.add(1), DiffOp.equal(1, 2)]

    def test_keys_need_only_be_hashable(self):
        ops = LcsEngine().diff([1, (2, 3), None], [1, None])
        assert ops == [DiffOp.equal(0, 0), DiffOp.remove(1), DiffOp.equal(2, 1)]

    def test_build_table_lengths(self):
        table = LcsEngine._build_table(["a", "b", "c"], ["a", "x", "c"])
        assert table[3][3] == 2
        assert table[0] == [0, 0, 0, 0]
        assert [row[0] for row in table] == [0, 0, 0, 0]
