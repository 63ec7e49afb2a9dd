"""Handle

The sequence handle: one async `pull`, plus chainable combinators.

    Handle.range(0).map(lambda x: x * x).take(3).to_list()
    # -> LazyCoroResult, awaits to Ok([0, 1, 4])

Every combinator returns a new Handle wrapping its parent. Nothing runs
until someone pulls."""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable, Iterable

from kungfu import Error, LazyCoroResult, Result

from ._errors import ConcurrentPullError
from ._helpers import is_element
from ._types import Effect, NoError, Outcome, Predicate, Pull
from .lift import AsyncFn, SyncFn
from .schedule import DEFAULT_POLICY, Scheduler, TrampolinePolicy

logger = logging.getLogger(__name__)


class Handle[T, E]:
    """
    Lazy, pull-based, single-consumer async sequence.

    Invariants:
    - one pull in flight at a time (a second raises ConcurrentPullError)
    - the first end-of-sequence or failure is latched and replayed on every
      later pull; the underlying pull is not called again
    """

    __slots__ = ("_pull", "_in_flight", "_latched")

    def __init__(self, pull: Pull[T, E], /) -> None:
        """Create Handle from a zero-arg coroutine function returning Outcome."""
        self._pull = pull
        self._in_flight = False
        self._latched: Outcome[T, E] | None = None

    # Constructors

    @staticmethod
    def sync[V, Err](fn: Callable[[], Outcome[V, Err]], /) -> Handle[V, Err | Exception]:
        """Handle over a synchronous pull. A raised exception becomes Error(exc)."""

        async def pull() -> Outcome[V, Err | Exception]:
            try:
                return fn()
            except Exception as exc:
                return Error(exc)

        return Handle(pull)

    @staticmethod
    def range(start: int, end: int | None = None, step: int = 1) -> Handle[int, NoError]:
        """Arithmetic progression; unbounded when end is None."""
        from .source.range import range_of
        return range_of(start, end, step)

    @staticmethod
    def from_iterable[V](items: Iterable[V], /) -> Handle[V, Exception]:
        """Handle over a plain Python iterable."""
        from .source.iterable import from_iterable
        return from_iterable(items)

    @staticmethod
    def empty() -> Handle[typing.Never, NoError]:
        """Already exhausted handle."""
        from .source.iterable import empty
        return empty()

    # Pull primitive

    async def pull(self) -> Outcome[T, E]:
        """Advance by one: element, end of sequence, or failure."""
        if self._latched is not None:
            return self._latched
        if self._in_flight:
            raise ConcurrentPullError(self)
        self._in_flight = True
        try:
            outcome = await self._pull()
        finally:
            self._in_flight = False
        if not is_element(outcome):
            logger.debug("%r latched %r", self, outcome)
            self._latched = outcome
        return outcome

    def __call__(self) -> Awaitable[Outcome[T, E]]:
        """Alias for pull()."""
        return self.pull()

    # Transform combinators

    def map[U](self, fn: Callable[[T], U] | SyncFn[[T], U], /) -> Handle[U, E | Exception]:
        """Transform every element. Exceptions from fn become the failure."""
        from .transform.map import map_each
        return map_each(self, fn)

    def map_async[U, F](
        self,
        fn: Callable[[T], Awaitable[Result[U, F]]],
        /,
    ) -> Handle[U, E | F]:
        """Transform every element with an async function returning Result."""
        from .transform.map import map_each
        return map_each(self, AsyncFn(fn))

    def filter(
        self,
        predicate: Predicate[T] | SyncFn[[T], bool],
        /,
        *,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> Handle[T, E | Exception]:
        """Keep elements the predicate accepts."""
        from .transform.filter import filter_each
        return filter_each(self, predicate, scheduler=scheduler, policy=policy)

    def filter_async[F](
        self,
        predicate: Callable[[T], Awaitable[Result[bool, F]]],
        /,
        *,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> Handle[T, E | F]:
        """Keep elements an async predicate accepts."""
        from .transform.filter import filter_each
        return filter_each(self, AsyncFn(predicate), scheduler=scheduler, policy=policy)

    def take(self, n: int, /) -> Handle[T, E]:
        """At most n elements."""
        from .transform.take import take
        return take(self, n)

    def zip[U, F](self, other: Handle[U, F], /) -> Handle[tuple[T, U], E | F]:
        """Pair elements with another handle, stopping at the shorter one."""
        from .concurrency.zip import zip_pair
        return zip_pair(self, other)

    def zip_with_index(self) -> Handle[tuple[T, int], E]:
        """Pair every element with its 0-based position."""
        from .concurrency.zip import zip_with_index
        return zip_with_index(self)

    def singleton(self) -> Handle[T, E | Exception]:
        """Pull the parent once; replay that outcome forever."""
        from .source.singleton import memoize
        return memoize(self)

    # Terminal operations

    def to_list(
        self,
        *,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> LazyCoroResult[list[T], E]:
        """Drain into a list. First failure wins, partial results are dropped."""
        from .collection.collect import to_list
        return to_list(self, scheduler=scheduler, policy=policy)

    def for_each(
        self,
        effect: Effect[T] | SyncFn[[T], object],
        /,
        *,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> LazyCoroResult[int, E | Exception]:
        """Drain, calling effect per element. Resolves to the element count."""
        from .collection.for_each import for_each
        return for_each(self, effect, scheduler=scheduler, policy=policy)

    def for_each_async[F](
        self,
        effect: Callable[[T], Awaitable[Result[object, F]]],
        /,
        *,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> LazyCoroResult[int, E | F]:
        """Drain with an async effect returning Result."""
        from .collection.for_each import for_each
        return for_each(self, AsyncFn(effect), scheduler=scheduler, policy=policy)

    def __repr__(self) -> str:
        name = getattr(self._pull, "__qualname__", type(self._pull).__name__)
        return f"Handle({name})"


__all__ = ("Handle",)
