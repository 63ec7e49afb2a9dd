from .scheduler import AsyncioScheduler, InlineScheduler, Scheduler, default_scheduler
from .trampoline import DEFAULT_POLICY, Trampoline, TrampolinePolicy

__all__ = (
    # Scheduler port
    "AsyncioScheduler",
    "InlineScheduler",
    "Scheduler",
    "default_scheduler",
    # Trampoline
    "DEFAULT_POLICY",
    "Trampoline",
    "TrampolinePolicy",
)
