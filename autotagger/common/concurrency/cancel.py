from __future__ import annotations

import threading

from autotagger.domain.errors import AutoTagCancelled


class CancelToken:
    """
    Cooperative cancellation flag threaded through an auto-tag call.
    Safe to cancel from another thread; work checks it between steps.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise AutoTagCancelled("auto-tag cancelled")

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)


def background() -> CancelToken:
    """A fresh token nobody cancels (for callers that do not need cancellation)."""
    return CancelToken()
