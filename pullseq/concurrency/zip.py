"""
Zip combinators
===============

Pairwise combination of two handles. Both parents are pulled concurrently
(asyncio.gather); the pair ends as soon as either side ends or fails.

When both sides fail on the same pull, the left failure is reported.
Results are inspected left to right after both pulls settle, so this does
not depend on which one finished first.
"""

from __future__ import annotations

import asyncio

from kungfu import Ok, Some

from .._helpers import element, end
from .._types import Outcome
from ..handle import Handle


def zip_pair[T, U, E, F](left: Handle[T, E], right: Handle[U, F]) -> Handle[tuple[T, U], E | F]:
    """
    Pull both, yield (left, right).

    No padding: the shorter side decides the length.
    """

    async def pull() -> Outcome[tuple[T, U], E | F]:
        left_outcome, right_outcome = await asyncio.gather(left.pull(), right.pull())
        match left_outcome, right_outcome:
            case Ok(Some() as a), Ok(Some() as b):
                return element((a.unwrap(), b.unwrap()))
            case Ok(Some()), Ok(_):
                return end()
            case Ok(Some()), _:
                return right_outcome
            case Ok(_), _:
                return end()
            case _:
                return left_outcome

    return Handle(pull)


def zip_with_index[T, E](handle: Handle[T, E]) -> Handle[tuple[T, int], E]:
    """zip against the unbounded range(0): (value, index) pairs."""
    from ..source.range import range_of
    return zip_pair(handle, range_of(0))


__all__ = ("zip_pair", "zip_with_index")
