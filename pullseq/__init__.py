"""
Lazy, pull-based async sequences.

A Handle exposes one operation, `await handle.pull()`, which yields an
Outcome: Ok(Some(value)), Ok(Nothing()) at the end, or Error(err).
Combinators wrap handles without running anything; terminal operations
drain them into kungfu LazyCoroResult values.

Architecture:
- handle        - Handle (pull primitive, latching, chainable methods)
- source        - range_of, from_iterable, empty, singleton, memoize
- transform     - map_each, filter_each, take
- concurrency   - zip_pair, zip_with_index
- collection    - to_list, for_each
- schedule      - Scheduler port + per-drain Trampoline
- lift          - SyncFn / AsyncFn shapes
"""

# Core types
from ._types import Effect, Lifted, NoError, Outcome, Predicate, Pull

# Outcome helpers
from ._helpers import element, end, failure, is_element, is_end

# Errors
from ._errors import ConcurrentPullError

# Handle
from .handle import Handle

# Lift helpers
from . import lift
from .lift import AsyncFn, SyncFn, lift_fn, lift_thunk

# Scheduling
from .schedule import (
    AsyncioScheduler,
    InlineScheduler,
    Scheduler,
    Trampoline,
    TrampolinePolicy,
    default_scheduler,
)

# Sources
from .source import empty, from_iterable, memoize, range_of, singleton

# Transforms
from .transform import filter_each, map_each, take

# Concurrency
from .concurrency import zip_pair, zip_with_index

# Terminal operations
from .collection import for_each, to_list

__all__ = (
    # Types
    "Effect",
    "Lifted",
    "NoError",
    "Outcome",
    "Predicate",
    "Pull",
    # Outcome helpers
    "element",
    "end",
    "failure",
    "is_element",
    "is_end",
    # Errors
    "ConcurrentPullError",
    # Handle
    "Handle",
    # Lift
    "lift",
    "AsyncFn",
    "SyncFn",
    "lift_fn",
    "lift_thunk",
    # Scheduling
    "AsyncioScheduler",
    "InlineScheduler",
    "Scheduler",
    "Trampoline",
    "TrampolinePolicy",
    "default_scheduler",
    # Sources
    "empty",
    "from_iterable",
    "memoize",
    "range_of",
    "singleton",
    # Transforms
    "filter_each",
    "map_each",
    "take",
    # Concurrency
    "zip_pair",
    "zip_with_index",
    # Terminal
    "for_each",
    "to_list",
)
