"""Tests for adapting Python iterables into ranges."""

import pytest

import pyoranges as pr


def test_all_of_sequence() -> None:
    """Test that sequences get bidirectional, sized ranges."""
    for source in ([1, 2], (1, 2), "ab", range(2)):
        rng = pr.all_of(source)
        assert rng.is_bidirectional()
        assert rng.is_sized()
        assert rng.size() == 2


def test_all_of_iterator() -> None:
    """Test that iterators are single pass."""
    rng = pr.all_of(iter([1, 2]))
    assert not rng.is_bidirectional()
    assert not rng.is_sized()
    assert list(rng) == [1, 2]
    assert list(rng) == []


def test_all_of_restartable_iterable() -> None:
    """Test that other iterables restart on every walk."""
    rng = pr.all_of({1: "a", 2: "b"})
    assert not rng.is_bidirectional()
    assert rng.is_sized()
    assert list(rng) == [1, 2]
    assert list(rng) == [1, 2]


def test_all_of_returns_ranges_unchanged() -> None:
    """Test that adapting a range is a no-op."""
    view = [1] | pr.append(2)
    assert pr.all_of(view) is view


def test_all_of_rejects_non_iterables() -> None:
    """Test that non iterable objects are rejected."""
    with pytest.raises(TypeError, match="not iterable"):
        pr.all_of(42)  # type: ignore[arg-type]


def test_index_cursor_bounds() -> None:
    """Test that index cursors refuse to leave their sequence."""
    rng = pr.all_of([1])
    cursor = rng.begin()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.retreat()
    cursor.advance()
    assert cursor == rng.end()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.advance()
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.get()


def test_index_cursor_distance() -> None:
    """Test that random access cursors know their distance."""
    rng = pr.all_of("abcd")
    assert rng.begin().distance_to(rng.end()) == pr.Some(4)


def test_stream_cursor_copy_and_equality() -> None:
    """Test copies of stream cursors and comparison with the end."""
    rng = pr.all_of(iter("xy"))
    cursor = rng.begin()
    twin = cursor.copy()
    assert cursor == twin
    cursor.advance()
    assert cursor != twin
    assert twin.get() == "x"
    cursor.advance()
    assert cursor == rng.end()
    assert cursor.distance_to(rng.end()) == pr.NONE
    with pytest.raises(pr.IterationOutOfRangeError):
        cursor.advance()


def test_forward_cursor_cannot_retreat() -> None:
    """Test that forward-only cursors reject retreat."""
    cursor = pr.all_of(iter([1])).begin()
    assert not cursor.is_bidirectional()
    with pytest.raises(TypeError, match="forward"):
        cursor.retreat()


def test_cursors_are_unhashable() -> None:
    """Test that mutable cursors cannot be hashed."""
    with pytest.raises(TypeError):
        hash(pr.all_of([1]).begin())


def test_empty() -> None:
    """Test the empty source."""
    assert list(pr.empty()) == []
    assert pr.empty() | pr.count() == 0


def test_from_range() -> None:
    """Test generating consecutive integers."""
    assert list(pr.from_range(3, 4)) == [3, 4, 5, 6]
    assert pr.from_range(-2, 3).size() == 3
    assert list(pr.from_range(5, 0)) == []
    with pytest.raises(pr.InvalidArgumentError):
        pr.from_range(0, -1)


def test_views_use_slots() -> None:
    """Test that views, cursors and options have no instance dict."""
    for obj in (
        pr.all_of([1]),
        pr.all_of([1]).begin(),
        [1] | pr.append(2),
        [1] | pr.chunk(1),
        [1] | pr.concat([2]),
        [1] | pr.order(),
        pr.Some(1),
        pr.NONE,
        pr.get_config(),
    ):
        assert not hasattr(obj, "__dict__")
