"""Internal helpers for pullseq.

Outcome constructors and small predicates shared by every combinator module.
These are re-exported from the package root for people writing custom pulls."""

from __future__ import annotations

import typing

from kungfu import Error, Nothing, Ok, Some

from ._types import Outcome


# Outcome constructors
def element[T](value: T) -> Outcome[T, typing.Never]:
    """Wrap a produced value: Ok(Some(value))."""
    return Ok(Some(value))


def end() -> Outcome[typing.Never, typing.Never]:
    """End of sequence: Ok(Nothing())."""
    return Ok(Nothing())


def failure[E](error: E) -> Outcome[typing.Never, E]:
    """Failed pull: Error(error)."""
    return Error(error)


# Outcome inspection
def is_element(outcome: Outcome[typing.Any, typing.Any]) -> bool:
    """True for Ok(Some(...))."""
    match outcome:
        case Ok(Some()):
            return True
        case _:
            return False


def is_end(outcome: Outcome[typing.Any, typing.Any]) -> bool:
    """True for Ok(Nothing())."""
    match outcome:
        case Ok(Some()) | Error(_):
            return False
        case _:
            return True


__all__ = (
    "element",
    "end",
    "failure",
    "is_element",
    "is_end",
)
