class RangesError(Exception):
    """Base class for every error raised by pyoranges."""


class InvalidArgumentError(RangesError, ValueError):
    """A construction-time parameter violates a precondition, e.g. a chunk size of zero."""


class EmptySequenceError(RangesError, LookupError):
    """A terminal operation that needs at least one element was given none."""


class ItemNotFoundError(RangesError, LookupError):
    """No element satisfied the predicate of a search."""


class PositionOutOfRangeError(RangesError, IndexError):
    """A positional access went past the last element of a non-empty sequence."""


class IterationOutOfRangeError(RangesError, IndexError):
    """A cursor was dereferenced or moved past its logical bounds.

    Seeing this from well-formed caller code points at a broken view or cursor.
    """


class DuplicateKeyError(RangesError, ValueError):
    """Two elements projected to the same key while building a mapping."""
