"""Map combinator

Element-wise transform with a SyncFn or AsyncFn."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Some

from .._helpers import element, failure
from .._types import Outcome
from ..handle import Handle
from ..lift import AsyncFn, SyncFn, lift_fn


def map_each[T, U, E, F](
    handle: Handle[T, E],
    fn: Callable[[T], U] | SyncFn[[T], U] | AsyncFn[[T], U, F],
) -> Handle[U, E | F | Exception]:
    """
    Apply fn to every element. End and failure pass through untouched.

    A SyncFn that raises turns that pull into Error(exc).
    """
    lifted = lift_fn(fn)

    async def pull() -> Outcome[U, E | F | Exception]:
        outcome = await handle.pull()
        match outcome:
            case Ok(Some() as found):
                match await lifted(found.unwrap()):
                    case Ok(value):
                        return element(value)
                    case Error(err):
                        return failure(err)
            case _:
                return outcome

    return Handle(pull)


__all__ = ("map_each",)
