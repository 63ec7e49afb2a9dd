"""
Core type definitions for pullseq.

Types and aliases used across the whole library.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from kungfu import Option, Result

# ============================================================================
# Type aliases
# ============================================================================

# Outcome = result of one pull
#   Ok(Some(value)) -> element
#   Ok(Nothing())   -> end of sequence
#   Error(err)      -> failure
# NOTE: Some(None) is an element, not the end. The absence of a value is
#       never used as a signal.
type Outcome[T, E] = Result[Option[T], E]

# Pull = zero-arg coroutine function producing the next outcome
type Pull[T, E] = Callable[[], Coroutine[typing.Any, typing.Any, Outcome[T, E]]]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Effect = function called purely for its side effect
type Effect[T] = Callable[[T], object]

# Uniform shape every transform/predicate is normalized into
type Lifted[A, U, E] = Callable[[A], Awaitable[Result[U, E]]]

# NoError = "never fails" semantic
type NoError = typing.Never

__all__ = (
    "Outcome",
    "Pull",
    "Predicate",
    "Effect",
    "Lifted",
    "NoError",
)
