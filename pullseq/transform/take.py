"""Take combinator"""

from __future__ import annotations

import logging

from .._helpers import end, is_element
from .._types import Outcome
from ..handle import Handle

logger = logging.getLogger(__name__)


def take[T, E](handle: Handle[T, E], n: int) -> Handle[T, E]:
    """
    Pass through at most n elements, then end.

    Once n pulls have been forwarded the parent is never pulled again.
    n <= 0 gives an exhausted handle.
    """
    remaining = max(n, 0)

    async def pull() -> Outcome[T, E]:
        nonlocal remaining
        if remaining == 0:
            logger.debug("take(%d): limit reached", n)
            return end()
        remaining -= 1
        outcome = await handle.pull()
        if not is_element(outcome):
            remaining = 0
        return outcome

    return Handle(pull)


__all__ = ("take",)
