import logging

from ._adaptors import Adaptor, Pipeline
from ._core import (
    Config,
    DuplicateKeyError,
    EmptySequenceError,
    InvalidArgumentError,
    ItemNotFoundError,
    IterationOutOfRangeError,
    PositionOutOfRangeError,
    RangesError,
    config_context,
    get_config,
    set_config,
)
from ._factories import (  # noqa: A004
    aggregate,
    all,
    any,
    append,
    as_view,
    average,
    cast,
    chunk,
    concat,
    contains,
    count,
    element_at,
    element_at_or_default,
    empty,
    first,
    first_or_default,
    from_range,
    join,
    last,
    last_or_default,
    max,
    max_by,
    min,
    min_by,
    order,
    order_by,
    order_by_descending,
    reverse,
    select,
    skip,
    slice,
    take,
    to,
    to_array,
    to_dict,
    to_dict_pairs,
    where,
)
from ._results import NONE, Option, OptionUnwrapError, Some
from ._views import (
    AppendPosition,
    AppendView,
    ChunkView,
    ConcatView,
    Cursor,
    OrderedView,
    Range,
    SubRange,
    TransformView,
    all_of,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Adaptor",
    "AppendPosition",
    "AppendView",
    "ChunkView",
    "ConcatView",
    "Config",
    "Cursor",
    "DuplicateKeyError",
    "EmptySequenceError",
    "InvalidArgumentError",
    "ItemNotFoundError",
    "IterationOutOfRangeError",
    "Option",
    "OptionUnwrapError",
    "OrderedView",
    "Pipeline",
    "PositionOutOfRangeError",
    "Range",
    "RangesError",
    "Some",
    "SubRange",
    "TransformView",
    "aggregate",
    "all",
    "all_of",
    "any",
    "append",
    "as_view",
    "average",
    "cast",
    "chunk",
    "concat",
    "config_context",
    "contains",
    "count",
    "element_at",
    "element_at_or_default",
    "empty",
    "first",
    "first_or_default",
    "from_range",
    "get_config",
    "join",
    "last",
    "last_or_default",
    "max",
    "max_by",
    "min",
    "min_by",
    "order",
    "order_by",
    "order_by_descending",
    "reverse",
    "select",
    "set_config",
    "skip",
    "slice",
    "take",
    "to",
    "to_array",
    "to_dict",
    "to_dict_pairs",
    "where",
]
