from .iterable import empty, from_iterable
from .range import range_of
from .singleton import memoize, singleton

__all__ = (
    "empty",
    "from_iterable",
    "memoize",
    "range_of",
    "singleton",
)
