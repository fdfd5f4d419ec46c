"""Unit tests for generic list reordering."""

import pytest

from readmegen.utils.ordering import move_item, shift_item


@pytest.mark.unit
def test_move_down_lands_after_target():
    assert move_item(["a", "b", "c"], "a", "c") == ["b", "c", "a"]


@pytest.mark.unit
def test_move_up_lands_before_target():
    assert move_item(["a", "b", "c"], "c", "a") == ["c", "a", "b"]


@pytest.mark.unit
def test_move_adjacent_swaps():
    """Test dropping an item on its neighbour swaps the pair and nothing else."""
    assert move_item(["a", "b", "c", "d"], "b", "c") == ["a", "c", "b", "d"]
    assert move_item(["a", "b", "c", "d"], "c", "b") == ["a", "c", "b", "d"]


@pytest.mark.unit
def test_move_missing_item_is_noop():
    items = ["a", "b"]

    assert move_item(items, "x", "a") == ["a", "b"]
    assert move_item(items, "a", "x") == ["a", "b"]


@pytest.mark.unit
def test_move_onto_self_is_noop():
    assert move_item(["a", "b", "c"], "b", "b") == ["a", "b", "c"]


@pytest.mark.unit
def test_move_does_not_mutate_input():
    items = ["a", "b", "c"]
    move_item(items, "a", "c")
    assert items == ["a", "b", "c"]


@pytest.mark.unit
def test_move_accepts_tuples():
    assert move_item(("a", "b"), "b", "a") == ["b", "a"]


@pytest.mark.unit
def test_shift_up_and_down():
    items = ["a", "b", "c"]

    assert shift_item(items, "b", -1) == ["b", "a", "c"]
    assert shift_item(items, "b", 1) == ["a", "c", "b"]


@pytest.mark.unit
def test_shift_clamps_at_bounds():
    items = ["a", "b", "c"]

    assert shift_item(items, "a", -1) == ["a", "b", "c"]
    assert shift_item(items, "c", 1) == ["a", "b", "c"]
    assert shift_item(items, "a", 10) == ["b", "c", "a"]


@pytest.mark.unit
def test_shift_missing_item_is_noop():
    assert shift_item(["a"], "z", 1) == ["a"]
