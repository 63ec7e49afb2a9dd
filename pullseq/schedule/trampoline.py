"""Trampoline

Bounded run of back-to-back pulls before handing control back to the
scheduler."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .scheduler import Scheduler, default_scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TrampolinePolicy:
    """How many pulls a single drain may chain before deferring."""

    max_stack: int = 500

    def __post_init__(self) -> None:
        if self.max_stack < 1:
            raise ValueError("TrampolinePolicy.max_stack must be >= 1")


DEFAULT_POLICY = TrampolinePolicy()


class Trampoline:
    """
    Per-drain bounce counter.

    Every drain (one to_list, one for_each, one filter search) owns a fresh
    instance; instances are never shared between drains.
    """

    __slots__ = ("_scheduler", "_policy", "_count")

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        policy: TrampolinePolicy = DEFAULT_POLICY,
    ) -> None:
        self._scheduler = scheduler if scheduler is not None else default_scheduler()
        self._policy = policy
        self._count = 0

    async def bounce(self) -> None:
        """Record one completed pull; defer once max_stack is reached."""
        self._count += 1
        if self._count < self._policy.max_stack:
            return
        self._count = 0
        logger.debug("trampoline deferring after %d pulls", self._policy.max_stack)
        await self._scheduler.defer()


__all__ = ("DEFAULT_POLICY", "Trampoline", "TrampolinePolicy")
