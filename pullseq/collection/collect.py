"""Collect combinator

Drain a handle into a list."""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result, Some

from ..handle import Handle
from ..schedule import DEFAULT_POLICY, Scheduler, Trampoline, TrampolinePolicy


def to_list[T, E](
    handle: Handle[T, E],
    *,
    scheduler: Scheduler | None = None,
    policy: TrampolinePolicy = DEFAULT_POLICY,
) -> LazyCoroResult[list[T], E]:
    """
    Pull until end, collecting elements in order.

    All-or-nothing: the first failure is returned and everything collected
    so far is discarded.
    """

    async def run() -> Result[list[T], E]:
        trampoline = Trampoline(scheduler, policy)
        items: list[T] = []
        while True:
            match await handle.pull():
                case Ok(Some() as found):
                    items.append(found.unwrap())
                case Ok(_):
                    return Ok(items)
                case Error(e):
                    return Error(e)
            await trampoline.bounce()

    return LazyCoroResult(run)


__all__ = ("to_list",)
