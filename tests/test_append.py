"""Tests for AppendView."""

import pytest

import pyoranges as pr


def test_append_yields_value_last() -> None:
    """Test that the appended value comes after every source element."""
    assert [1, 2] | pr.append(0) | pr.to() == [1, 2, 0]


def test_append_to_empty_source() -> None:
    """Test appending to an empty source yields only the value."""
    view = [] | pr.append(7)
    assert list(view) == [7]
    assert view.size() == 1


def test_append_length_for_various_sources() -> None:
    """Test that the view yields one more element than its source, the last one being the value."""
    for source in ([], [1], list(range(10)), "abc"):
        result = list(source | pr.append("v"))
        assert len(result) == len(source) + 1
        assert result[-1] == "v"


def test_append_size_without_iterating() -> None:
    """Test that a sized source gives a sized view."""
    view = range(5) | pr.append(5)
    assert view.is_sized()
    assert view.size() == 6


def test_append_over_iterator_is_not_sized() -> None:
    """Test that a one-shot iterator source gives an unsized, forward-only view."""
    view = iter([1, 2]) | pr.append(3)
    assert not view.is_sized()
    assert not view.is_bidirectional()
    with pytest.raises(TypeError):
        view.size()
    assert list(view) == [1, 2, 3]


def test_append_advance_past_end_raises() -> None:
    """Test that advancing or dereferencing the end cursor fails."""
    view = [1] | pr.append(2)
    cursor = view.begin()
    cursor.advance().advance()
    assert cursor == view.end()
    assert cursor.position is pr.AppendPosition.IN_END
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.advance()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.get()


def test_append_cursor_phases() -> None:
    """Test the cursor moves from the source to the appended value."""
    view = [1] | pr.append(2)
    cursor = view.begin()
    assert cursor.position is pr.AppendPosition.IN_RANGE
    assert cursor.get() == 1
    cursor.advance()
    assert cursor.position is pr.AppendPosition.IN_APPEND
    assert cursor.get() == 2
    empty_begin = ([] | pr.append(2)).begin()
    assert empty_begin.position is pr.AppendPosition.IN_APPEND


def test_append_retreat_walks_back() -> None:
    """Test retreating from the end of a bidirectional append view."""
    view = [1, 2] | pr.append(3)
    cursor = view.end()
    assert cursor.retreat().get() == 3
    assert cursor.retreat().get() == 2
    assert cursor.retreat().get() == 1
    assert cursor == view.begin()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.retreat()


def test_append_is_lazy_and_reusable() -> None:
    """Test that the view borrows its source and can be iterated again."""
    source = [1, 2]
    view = source | pr.append(3)
    source.append(4)
    assert list(view) == [1, 2, 4, 3]
    assert list(view) == [1, 2, 4, 3]


def test_append_cursor_copy_is_independent() -> None:
    """Test that a copied cursor keeps its own position."""
    view = iter("ab") | pr.append("c")
    cursor = view.begin()
    twin = cursor.copy()
    cursor.advance()
    assert twin.get() == "a"
    assert cursor.get() == "b"
    assert twin != cursor
