"""Tests for Option results."""

import pytest

import pyoranges as pr


def test_some_accessors() -> None:
    """Test reading a present value."""
    opt = pr.Some(3)
    assert opt.is_some()
    assert not opt.is_none()
    assert opt.unwrap() == 3
    assert opt.expect("missing") == 3
    assert opt.unwrap_or(0) == 3


def test_none_accessors() -> None:
    """Test reading an absent value."""
    assert pr.NONE.is_none()
    assert pr.NONE.unwrap_or(0) == 0
    assert pr.NONE.unwrap_or_else(lambda: 5) == 5
    with pytest.raises(pr.OptionUnwrapError):
        pr.NONE.unwrap()
    with pytest.raises(pr.OptionUnwrapError, match="no adult"):
        pr.NONE.expect("no adult")


def test_combinators() -> None:
    """Test map, and_then, or_else and filter."""
    assert pr.Some(2).map(lambda x: x * 2) == pr.Some(4)
    assert pr.NONE.map(lambda x: x * 2) is pr.NONE
    assert pr.Some(2).and_then(lambda x: pr.Some(x + 1)) == pr.Some(3)
    assert pr.Some(2).and_then(lambda _: pr.NONE) is pr.NONE
    assert pr.NONE.or_else(lambda: pr.Some(1)) == pr.Some(1)
    assert pr.Some(2).filter(lambda x: x > 5) is pr.NONE
    assert pr.Some(9).filter(lambda x: x > 5) == pr.Some(9)


def test_from_optional() -> None:
    """Test building an option from a nullable value."""
    assert pr.Option.from_(0) == pr.Some(0)
    assert pr.Option.from_(None) is pr.NONE


def test_none_value_is_distinct_from_absence() -> None:
    """Test that a stored None is still a present value."""
    assert [None] | pr.first_or_default() == pr.Some(None)
    assert [] | pr.first_or_default() == pr.NONE
