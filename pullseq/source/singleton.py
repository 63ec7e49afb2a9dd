"""
Singleton combinators
=====================

Run an underlying pull (or factory) exactly once and replay its outcome
forever. Failures are cached too: a factory that raised on its first call
keeps reporting that same exception and is never called again. This holds
for exceptions escaping an async factory or parent pull as well.

Callers that arrive while the first run is still in flight queue on a
shared future and all receive the same outcome. Delivery to them goes
through the event loop's future callbacks, not the injected Scheduler.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from kungfu import Error, Ok

from .._helpers import element, failure
from .._types import Outcome, Pull
from ..handle import Handle
from ..lift import AsyncFn, SyncFn, lift_thunk

logger = logging.getLogger(__name__)


class _SharedHandle[T, E](Handle[T, E]):
    """Handle whose pull may be awaited by many callers at once."""

    __slots__ = ()

    async def pull(self) -> Outcome[T, E]:
        return await self._pull()


def _once[T, E](source: Pull[T, E]) -> _SharedHandle[T, E | Exception]:
    settled: Outcome[T, E | Exception] | None = None
    in_flight: asyncio.Future[Outcome[T, E | Exception]] | None = None

    async def pull() -> Outcome[T, E | Exception]:
        nonlocal settled, in_flight
        if settled is not None:
            return settled
        if in_flight is not None:
            logger.debug("singleton: queued behind first pull")
            return await asyncio.shield(in_flight)

        in_flight = asyncio.get_running_loop().create_future()
        logger.debug("singleton: running underlying pull")
        try:
            outcome = await source()
        except Exception as exc:
            outcome = failure(exc)
        except BaseException:
            # Cancelled before settling: queued callers see CancelledError,
            # the next caller runs the source again.
            in_flight.cancel()
            in_flight = None
            raise
        settled = outcome
        in_flight.set_result(outcome)
        return outcome

    return _SharedHandle(pull)


def memoize[T, E](handle: Handle[T, E]) -> Handle[T, E | Exception]:
    """Pull handle once; every later pull replays that outcome."""
    return _once(handle.pull)


def singleton[T, E](
    factory: Callable[[], T] | SyncFn[[], T] | AsyncFn[[], T, E],
) -> Handle[T, E | Exception]:
    """
    Handle whose every pull yields factory()'s one-time result.

    Sync factories may raise (the exception is cached as the failure);
    AsyncFn factories return Result.
    """
    thunk = lift_thunk(factory)

    async def run() -> Outcome[T, E | Exception]:
        match await thunk():
            case Ok(value):
                return element(value)
            case Error(err):
                return failure(err)

    return _once(run)


__all__ = ("memoize", "singleton")
