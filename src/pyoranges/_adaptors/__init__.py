from ._lazy import (
    AppendAdaptor,
    AsViewAdaptor,
    ChunkAdaptor,
    ConcatAdaptor,
    IterAdaptor,
    OrderAdaptor,
)
from ._protocol import Adaptor, Pipeline
from ._terminals import (
    AggregateAdaptor,
    AllAdaptor,
    AnyAdaptor,
    AverageAdaptor,
    ContainsAdaptor,
    CountAdaptor,
    ElementAtAdaptor,
    ElementAtOrDefaultAdaptor,
    ExtremumAdaptor,
    FirstAdaptor,
    FirstOrDefaultAdaptor,
    LastAdaptor,
    LastOrDefaultAdaptor,
    ToAdaptor,
    ToArrayAdaptor,
    ToMappingAdaptor,
)

__all__ = [
    "Adaptor",
    "AggregateAdaptor",
    "AllAdaptor",
    "AnyAdaptor",
    "AppendAdaptor",
    "AsViewAdaptor",
    "AverageAdaptor",
    "ChunkAdaptor",
    "ConcatAdaptor",
    "ContainsAdaptor",
    "CountAdaptor",
    "ElementAtAdaptor",
    "ElementAtOrDefaultAdaptor",
    "ExtremumAdaptor",
    "FirstAdaptor",
    "FirstOrDefaultAdaptor",
    "IterAdaptor",
    "LastAdaptor",
    "LastOrDefaultAdaptor",
    "OrderAdaptor",
    "Pipeline",
    "ToAdaptor",
    "ToArrayAdaptor",
    "ToMappingAdaptor",
]
