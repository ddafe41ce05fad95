"""Tests for array_move and clamp_index."""

import pytest

from tierctl.domain.ordering import array_move, clamp_index


class TestClampIndex:
    @pytest.mark.parametrize(
        "index,length,expected",
        [(-3, 4, 0), (0, 4, 0), (2, 4, 2), (4, 4, 4), (9, 4, 4), (1, 0, 0)],
    )
    def test_clamps(self, index: int, length: int, expected: int) -> None:
        assert clamp_index(index, length) == expected


class TestArrayMove:
    def test_move_down(self) -> None:
        assert array_move(["a", "b", "c", "d"], 0, 2) == ["b", "c", "a", "d"]

    def test_move_up(self) -> None:
        assert array_move(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]

    def test_adjacent_swap(self) -> None:
        assert array_move(["a", "b"], 0, 1) == ["b", "a"]

    def test_same_index(self) -> None:
        assert array_move(["a", "b", "c"], 1, 1) == ["a", "b", "c"]

    def test_target_clamped_to_end(self) -> None:
        assert array_move(["a", "b", "c"], 0, 99) == ["b", "c", "a"]

    def test_negative_target_clamped_to_start(self) -> None:
        assert array_move(["a", "b", "c"], 2, -5) == ["c", "a", "b"]

    def test_returns_copy(self) -> None:
        original = ["a", "b", "c"]
        moved = array_move(original, 0, 2)
        assert original == ["a", "b", "c"]
        assert moved is not original

    def test_preserves_multiset(self) -> None:
        values = list(range(10))
        for src in range(10):
            for dst in range(10):
                assert sorted(array_move(values, src, dst)) == values

    @pytest.mark.parametrize("from_index", [-1, 3, 10])
    def test_invalid_from_index(self, from_index: int) -> None:
        with pytest.raises(IndexError):
            array_move(["a", "b", "c"], from_index, 0)


def test_docstring_examples() -> None:
    import doctest

    from tierctl.domain import ordering

    failures, _ = doctest.testmod(ordering)
    assert failures == 0
