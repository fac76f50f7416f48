"""Tests for OrderedView."""

import logging
import operator
from collections.abc import Iterator

import pytest

import pyoranges as pr


class CountingSource:
    """Iterable recording how many times it is drained."""

    def __init__(self, values: list[int]) -> None:
        self.values = values
        self.drains = 0

    def __iter__(self) -> Iterator[int]:
        self.drains += 1
        return iter(self.values)


def test_order_ascending() -> None:
    """Test the default ascending sort."""
    assert [3, 1, 2] | pr.order() | pr.to() == [1, 2, 3]


def test_order_by_descending() -> None:
    """Test sorting in descending order."""
    assert [2, 1, 4, 3, 5] | pr.order_by_descending() | pr.to() == [5, 4, 3, 2, 1]


def test_order_by_projection_is_a_sorted_permutation() -> None:
    """Test that sorting by a key keeps every element and orders the keys."""
    source = ["pear", "fig", "banana", "kiwi", "apple", ""]
    result = source | pr.order_by(len) | pr.to()
    assert sorted(result) == sorted(source)
    keys = [len(x) for x in result]
    assert keys == sorted(keys)


def test_order_by_is_stable() -> None:
    """Test that elements with equal keys keep their relative order."""
    people = [("Jake", 20), ("Emily", 27), ("Alexander", 20)]
    assert people | pr.order_by(operator.itemgetter(1)) | pr.select(operator.itemgetter(0)) | pr.to() == [
        "Jake",
        "Alexander",
        "Emily",
    ]


def test_order_by_descending_with_projection() -> None:
    """Test descending order on a projected key."""
    assert ["a", "ccc", "bb"] | pr.order_by_descending(len) | pr.to() == ["ccc", "bb", "a"]


def test_order_with_custom_relation() -> None:
    """Test an arbitrary comparison relation."""
    by_last_digit = pr.OrderedView([21, 13, 32, 40], lambda a, b: a % 10 < b % 10)
    assert list(by_last_digit) == [40, 21, 32, 13]


def test_order_is_lazy() -> None:
    """Test that building the view does not drain the source."""
    source = CountingSource([3, 1, 2])
    view = source | pr.order()
    assert source.drains == 0
    assert not view.is_materialized()
    assert list(view) == [1, 2, 3]
    assert view.is_materialized()


def test_order_drains_source_once() -> None:
    """Test that repeated begin, end, size and iteration reuse a single sorted buffer."""
    source = CountingSource([5, 4, 3])
    view = source | pr.order()
    view.begin()
    view.end()
    view.begin()
    view.end()
    assert view.size() == 3
    assert list(view) == [3, 4, 5]
    assert list(view) == [3, 4, 5]
    assert source.drains == 1


def test_order_of_iterator() -> None:
    """Test sorting a one-shot iterator."""
    view = iter([2, 3, 1]) | pr.order()
    assert list(view) == [1, 2, 3]
    assert list(view) == [1, 2, 3]


def test_order_is_bidirectional_and_sized() -> None:
    """Test the capabilities of a sorted view."""
    view = (x for x in [2, 1]) | pr.order()
    assert view.is_bidirectional()
    assert view.is_sized()
    assert view | pr.last() == 2


def test_order_logs_materialization(caplog: pytest.LogCaptureFixture) -> None:
    """Test that sorting the buffer is reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="pyoranges"):
        list([2, 1] | pr.order())
    assert "materialized 2 elements" in caplog.text


def test_order_source_is_not_modified() -> None:
    """Test that the source is copied before sorting."""
    source = [3, 1, 2]
    assert source | pr.order() | pr.first() == 1
    assert source == [3, 1, 2]
