"""Tests for applying and composing adaptors."""

import pytest

import pyoranges as pr


def test_pipe_call_and_into_are_equivalent() -> None:
    """Test the three ways of applying an adaptor."""
    adaptor = pr.order()
    source = [3, 1, 2]
    assert list(source | adaptor) == list(adaptor(source)) == list(pr.as_view()(source).into(adaptor)) == [1, 2, 3]


def test_chain_is_evaluated_left_to_right() -> None:
    """Test that each step receives the previous result."""
    result = [5, 3, 8, 1] | pr.where(lambda x: x > 2) | pr.order() | pr.append(0) | pr.to()
    assert result == [3, 5, 8, 0]


def test_lazy_steps_do_not_iterate() -> None:
    """Test that building a chain of views runs no element function until a terminal step."""
    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    view = [1, 2, 3] | pr.select(record) | pr.append(4) | pr.concat([5])
    assert calls == []
    assert view | pr.first() == 1
    assert calls == [1]


def test_adaptors_are_reusable() -> None:
    """Test that one adaptor can be applied to several sources."""
    take_two = pr.take(2)
    assert [1, 2, 3] | take_two | pr.to() == [1, 2]
    assert "abc" | take_two | pr.to() == ["a", "b"]


def test_adaptors_are_immutable() -> None:
    """Test that captured parameters cannot be reassigned."""
    adaptor = pr.append(1)
    with pytest.raises(AttributeError):
        adaptor.value = 2  # type: ignore[misc]


def test_pipeline_composition() -> None:
    """Test that piping adaptors together gives a reusable pipeline."""
    top_two = pr.order_by_descending() | pr.take(2) | pr.to()
    assert isinstance(top_two, pr.Pipeline)
    assert len(top_two.steps) == 3
    assert [5, 3, 8, 1] | top_two == [8, 5]
    assert top_two([0, 9, 4]) == [9, 4]


def test_pipeline_of_pipelines_is_flat() -> None:
    """Test that joining two pipelines concatenates their steps."""
    evens = pr.where(lambda x: x % 2 == 0) | pr.select(lambda x: x * 10)
    collect = pr.append(-1) | pr.to()
    both = evens | collect
    assert len(both.steps) == 4
    assert range(5) | both == [0, 20, 40, -1]


def test_pipe_with_non_adaptor_is_unsupported() -> None:
    """Test that an adaptor cannot be piped into an arbitrary object."""
    with pytest.raises(TypeError):
        pr.to() | 3  # type: ignore[operator]


def test_views_are_ranges() -> None:
    """Test that every lazy adaptor produces a Range with cursors."""
    for view in (
        [1] | pr.append(2),
        [1] | pr.chunk(1),
        [1] | pr.concat([2]),
        [1] | pr.order(),
        [1] | pr.where(bool),
    ):
        assert isinstance(view, pr.Range)
        assert isinstance(view.begin(), pr.Cursor)
        assert view.begin() != view.end()


def test_inspect_returns_same_view() -> None:
    """Test that inspect runs a side effect and returns the view itself."""
    seen: list[list[int]] = []
    view = [1, 2] | pr.append(3)
    assert view.inspect(lambda v: seen.append(list(v))) is view
    assert seen == [[1, 2, 3]]


def test_view_repr_previews_elements() -> None:
    """Test the repr of views and sub ranges."""
    assert repr([1, 2] | pr.append(3)) == "AppendView(SequenceRange([1, 2]), 3)"
    chunk = ([1, 2, 3] | pr.chunk(2)).begin().get()
    assert repr(chunk) == "SubRange([1, 2])"
