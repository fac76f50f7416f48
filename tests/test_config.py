"""Tests for display configuration."""

import pytest

import pyoranges as pr


def test_default_config() -> None:
    """Test the default display settings."""
    cfg = pr.get_config()
    assert cfg.max_items == 20
    assert cfg.width == 80


def test_config_context_restores_values() -> None:
    """Test that changes are undone when the block exits."""
    with pr.config_context(max_items=2, width=40) as cfg:
        assert cfg is pr.get_config()
        assert cfg.max_items == 2
        assert cfg.width == 40
    assert pr.get_config().max_items == 20
    assert pr.get_config().width == 80


def test_config_context_restores_after_error() -> None:
    """Test that changes are undone even if the block raises."""
    with pytest.raises(KeyError), pr.config_context(max_items=1):
        raise KeyError
    assert pr.get_config().max_items == 20


def test_max_items_truncates_repr() -> None:
    """Test that long previews are cut after max_items elements."""
    chunk = (list(range(10)) | pr.chunk(10)).begin().get()
    with pr.config_context(max_items=3):
        assert repr(chunk) == "SubRange([0, 1, 2]...)"
    assert repr(chunk) == "SubRange([0, 1, 2, 3, 4, 5, 6, 7, 8, 9])"


def test_repr_does_not_consume_iterators() -> None:
    """Test that printing a view over a stream leaves the stream untouched."""
    view = iter([1, 2]) | pr.append(3)
    repr(view)
    assert list(view) == [1, 2, 3]


@pytest.mark.parametrize(
    "changes",
    [{"max_items": 0}, {"width": -1}, {"width": "wide"}, {"colour": 1}],
)
def test_set_config_rejects_invalid_values(changes: dict[str, object]) -> None:
    """Test validation of config updates."""
    with pytest.raises(pr.InvalidArgumentError):
        pr.set_config(**changes)
    assert pr.get_config().max_items == 20
