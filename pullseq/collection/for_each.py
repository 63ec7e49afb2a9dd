"""For-each combinator

Drain a handle for side effects."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result, Some

from ..handle import Handle
from ..lift import AsyncFn, SyncFn, lift_fn
from ..schedule import DEFAULT_POLICY, Scheduler, Trampoline, TrampolinePolicy


def for_each[T, E, F](
    handle: Handle[T, E],
    effect: Callable[[T], object] | SyncFn[[T], object] | AsyncFn[[T], object, F],
    *,
    scheduler: Scheduler | None = None,
    policy: TrampolinePolicy = DEFAULT_POLICY,
) -> LazyCoroResult[int, E | F | Exception]:
    """
    Call effect once per element, in order. Resolves to the element count.

    Stops at the first failure, whether it came from upstream or from the
    effect itself.
    """
    lifted = lift_fn(effect)

    async def run() -> Result[int, E | F | Exception]:
        trampoline = Trampoline(scheduler, policy)
        count = 0
        while True:
            match await handle.pull():
                case Ok(Some() as found):
                    match await lifted(found.unwrap()):
                        case Ok(_):
                            count += 1
                        case Error(e):
                            return Error(e)
                case Ok(_):
                    return Ok(count)
                case Error(e):
                    return Error(e)
            await trampoline.bounce()

    return LazyCoroResult(run)


__all__ = ("for_each",)
