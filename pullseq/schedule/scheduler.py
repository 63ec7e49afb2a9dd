"""Scheduler port

The one thing pullseq needs from its host: "let the event loop run, then
continue as soon as possible"."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol


class Scheduler(Protocol):
    """Deferral port."""

    async def defer(self) -> None:
        """Yield control to the event loop and resume with minimal delay."""
        ...


class AsyncioScheduler:
    """Default scheduler: one `asyncio.sleep(0)` round-trip."""

    __slots__ = ()

    async def defer(self) -> None:
        await asyncio.sleep(0)

    def __repr__(self) -> str:
        return "AsyncioScheduler()"


@dataclass(slots=True)
class InlineScheduler:
    """
    Scheduler that never suspends, only counts.

    For tests: lets a harness assert how often a drain asked to defer
    without depending on a real event loop round-trip.
    """

    deferrals: int = 0

    async def defer(self) -> None:
        self.deferrals += 1


_DEFAULT = AsyncioScheduler()


def default_scheduler() -> Scheduler:
    """Process-wide AsyncioScheduler."""
    return _DEFAULT


__all__ = ("AsyncioScheduler", "InlineScheduler", "Scheduler", "default_scheduler")
