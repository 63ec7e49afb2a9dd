"""
Lift helpers: normalize user functions into the uniform async shape.

    from pullseq import lift as L

    L.lift_fn(lambda x: x + 1)          # SyncFn, exceptions -> Error
    L.lift_fn(L.AsyncFn(fetch))         # already async -> Result
    L.lift_thunk(load_config)           # zero-arg factory
"""

from __future__ import annotations

from .shape import AsyncFn, SyncFn, catching, lift_fn, lift_thunk

__all__ = (
    "AsyncFn",
    "SyncFn",
    "catching",
    "lift_fn",
    "lift_thunk",
)
