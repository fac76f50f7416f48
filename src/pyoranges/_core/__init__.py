from ._config import Config, config_context, get_config, set_config
from ._errors import (
    DuplicateKeyError,
    EmptySequenceError,
    InvalidArgumentError,
    ItemNotFoundError,
    IterationOutOfRangeError,
    PositionOutOfRangeError,
    RangesError,
)
from ._main import Pipeable
from ._protocols import Relation, SupportsRichComparison

__all__ = [
    "Config",
    "DuplicateKeyError",
    "EmptySequenceError",
    "InvalidArgumentError",
    "ItemNotFoundError",
    "IterationOutOfRangeError",
    "Pipeable",
    "PositionOutOfRangeError",
    "RangesError",
    "Relation",
    "SupportsRichComparison",
    "config_context",
    "get_config",
    "set_config",
]
