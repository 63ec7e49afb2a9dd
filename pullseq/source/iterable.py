"""Iterable sources"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from .._helpers import element, end, failure
from .._types import NoError, Outcome
from ..handle import Handle

_EXHAUSTED = object()


def from_iterable[T](items: Iterable[T]) -> Handle[T, Exception]:
    """
    Pull from a plain iterable. The iterator is created on the first pull.

    An exception raised by the iterable becomes the failure outcome.
    """
    iterator: Iterator[T] | None = None

    async def pull() -> Outcome[T, Exception]:
        nonlocal iterator
        try:
            if iterator is None:
                iterator = iter(items)
            value = next(iterator, _EXHAUSTED)
        except Exception as exc:
            return failure(exc)
        if value is _EXHAUSTED:
            return end()
        return element(typing.cast(T, value))

    return Handle(pull)


def empty() -> Handle[typing.Never, NoError]:
    """Immediately exhausted."""

    async def pull() -> Outcome[typing.Never, NoError]:
        return end()

    return Handle(pull)


__all__ = ("empty", "from_iterable")
