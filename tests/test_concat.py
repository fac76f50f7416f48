"""Tests for ConcatView."""

import pytest

import pyoranges as pr


def test_concat_basic() -> None:
    """Test that the second source follows the first."""
    view = [1, 2, 3] | pr.concat([4, 5])
    assert list(view) == [1, 2, 3, 4, 5]
    assert view.size() == 5


def test_concat_lengths_and_order() -> None:
    """Test element count and order for several source pairs."""
    pairs = [([], []), ([1], []), ([], [1]), ([1, 2], [3, 4, 5]), (list(range(7)), list(range(7, 9)))]
    for first, second in pairs:
        result = list(first | pr.concat(second))
        assert len(result) == len(first) + len(second)
        assert result[: len(first)] == first
        assert result[len(first) :] == second


def test_concat_size_without_iterating() -> None:
    """Test that the size of two sized sources is known without iteration."""
    view = pr.ConcatView(range(3), "ab")
    assert view.is_sized()
    assert view.size() == 5


def test_concat_with_unsized_source() -> None:
    """Test that a stream on either side makes the view unsized."""
    view = [1, 2] | pr.concat(iter([3]))
    assert not view.is_sized()
    assert not view.is_bidirectional()
    assert view | pr.count() == 3


def test_concat_empty_first_starts_in_second() -> None:
    """Test that the begin cursor skips an empty first source."""
    view = [] | pr.concat([9])
    cursor = view.begin()
    assert cursor.in_second
    assert cursor.get() == 9


def test_concat_both_empty() -> None:
    """Test that two empty sources give an empty view."""
    view = pr.ConcatView([], ())
    assert view.begin() == view.end()
    assert list(view) == []


def test_concat_retreat_crosses_boundary() -> None:
    """Test walking a concat view backwards."""
    view = [1, 2] | pr.concat([3, 4])
    assert list(view | pr.reverse()) == [4, 3, 2, 1]
    cursor = view.end()
    cursor.retreat().retreat()
    assert cursor.get() == 3
    cursor.retreat()
    assert not cursor.in_second
    assert cursor.get() == 2


def test_concat_retreat_with_empty_first_raises() -> None:
    """Test that the start of the second source is the start of the view when the first one is empty."""
    view = [] | pr.concat([1])
    cursor = view.begin()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.retreat()


def test_concat_accessors() -> None:
    """Test that both sources are exposed as ranges."""
    view = pr.ConcatView([1], [2])
    assert list(view.first) == [1]
    assert list(view.second) == [2]


def test_concat_of_streams() -> None:
    """Test concatenating two generators."""
    first = (x for x in range(2))
    second = (x for x in range(2, 4))
    assert first | pr.concat(second) | pr.to() == [0, 1, 2, 3]
