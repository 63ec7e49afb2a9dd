"""Range source

Arithmetic progression, optionally unbounded."""

from __future__ import annotations

from .._helpers import element, end as end_of_sequence
from .._types import NoError, Outcome
from ..handle import Handle


def range_of(start: int, end: int | None = None, step: int = 1) -> Handle[int, NoError]:
    """
    start, start + step, start + 2 * step, ...

    Ascending (step > 0) stops once the value reaches end; descending
    (step < 0) once it drops to end. end=None never stops: limit it
    downstream with take().
    """
    if step == 0:
        raise ValueError("range_of() step must not be zero")

    current = start

    def in_bounds(value: int) -> bool:
        if end is None:
            return True
        return value < end if step > 0 else value > end

    async def pull() -> Outcome[int, NoError]:
        nonlocal current
        if not in_bounds(current):
            return end_of_sequence()
        value = current
        current += step
        return element(value)

    return Handle(pull)


__all__ = ("range_of",)
