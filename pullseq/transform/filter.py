"""Filter combinator

Keep elements a predicate accepts. Each pull searches forward through the
parent; long runs of rejected elements go through the trampoline."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Some

from .._helpers import failure
from .._types import Outcome
from ..handle import Handle
from ..lift import AsyncFn, SyncFn, lift_fn
from ..schedule import DEFAULT_POLICY, Scheduler, Trampoline, TrampolinePolicy


def filter_each[T, E, F](
    handle: Handle[T, E],
    predicate: Callable[[T], bool] | SyncFn[[T], bool] | AsyncFn[[T], bool, F],
    *,
    scheduler: Scheduler | None = None,
    policy: TrampolinePolicy = DEFAULT_POLICY,
) -> Handle[T, E | F | Exception]:
    """
    Pull until predicate accepts an element.

    Rejected elements are dropped. A predicate failure aborts the search
    and becomes the outcome; it does not skip to the next candidate.
    """
    lifted = lift_fn(predicate)

    async def pull() -> Outcome[T, E | F | Exception]:
        trampoline = Trampoline(scheduler, policy)
        while True:
            outcome = await handle.pull()
            match outcome:
                case Ok(Some() as found):
                    match await lifted(found.unwrap()):
                        case Ok(accepted):
                            if accepted:
                                return outcome
                        case Error(err):
                            return failure(err)
                case _:
                    return outcome
            await trampoline.bounce()

    return Handle(pull)


__all__ = ("filter_each",)
