from __future__ import annotations


class ConcurrentPullError(RuntimeError):
    """A second pull was started before the first one settled."""

    handle: object

    def __init__(self, handle: object) -> None:
        self.handle = handle
        super().__init__(f"{handle!r} already has a pull in flight")


__all__ = ("ConcurrentPullError",)
