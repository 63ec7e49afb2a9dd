"""
Function shapes for transforms, predicates and factories.

A user function comes in one of two explicitly tagged shapes:

    SyncFn(f)   f(value) -> U              may raise
    AsyncFn(f)  async f(value) -> Result   reports failure as Error(...)

Combinators resolve the shape once, when they are built, and from then on
only ever see the uniform `async (value) -> Result[U, E]` form.

Example:
    handle.map(lambda x: x * 2)                         # bare callable = SyncFn
    handle.map(SyncFn(int))
    handle.map(AsyncFn(fetch_user))                     # async -> Result
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._types import Lifted


@dataclass(frozen=True, slots=True)
class SyncFn[**P, U]:
    """Plain function returning its value directly. Exceptions become Error(exc)."""

    fn: Callable[P, U]


@dataclass(frozen=True, slots=True)
class AsyncFn[**P, U, E]:
    """Coroutine function returning Result[U, E]."""

    fn: Callable[P, Awaitable[Result[U, E]]]


def catching[A, U](fn: Callable[[A], U]) -> Lifted[A, U, Exception]:
    """
    Lift a sync one-arg function, converting raised exceptions to Error.

    NOTE: Catches Exception subclasses only. KeyboardInterrupt and
          CancelledError keep propagating.
    """
    async def run(value: A) -> Result[U, Exception]:
        try:
            return Ok(fn(value))
        except Exception as exc:
            return Error(exc)

    return run


def lift_fn[A, U, E](
    fn: SyncFn[[A], U] | AsyncFn[[A], U, E] | Callable[[A], U],
) -> Lifted[A, U, E | Exception]:
    """
    Normalize a one-arg transform/predicate into `async (value) -> Result`.

    A bare callable is treated as SyncFn. Resolution happens here, once,
    never per call.
    """
    match fn:
        case AsyncFn(f):
            return f
        case SyncFn(f):
            return catching(f)
        case _ if callable(fn):
            return catching(fn)
        case _:
            raise TypeError(f"expected SyncFn, AsyncFn or callable, got {type(fn).__name__}")


def lift_thunk[U, E](
    fn: SyncFn[[], U] | AsyncFn[[], U, E] | Callable[[], U],
) -> Callable[[], Awaitable[Result[U, E | Exception]]]:
    """Zero-arg variant of lift_fn, used for factories."""
    match fn:
        case AsyncFn(f):
            return f
        case SyncFn(f):
            sync = f
        case _ if callable(fn):
            sync = fn
        case _:
            raise TypeError(f"expected SyncFn, AsyncFn or callable, got {type(fn).__name__}")

    async def run() -> Result[U, Exception]:
        try:
            return Ok(sync())
        except Exception as exc:
            return Error(exc)

    return run


__all__ = (
    "AsyncFn",
    "SyncFn",
    "catching",
    "lift_fn",
    "lift_thunk",
)

