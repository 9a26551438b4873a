"""
Cancelable self-rescheduling frame loop
"""

from __future__ import annotations

from typing import Any, Callable, Optional

FrameCallback = Callable[[], None]
RequestFrame = Callable[[FrameCallback], Any]
CancelFrame = Callable[[Any], None]


class FrameLoop:
    """
    Holds the handle of the one pending frame request.

    request_frame(callback) asks the host to call callback on the next frame
    and returns a handle; cancel_frame(handle) withdraws that request.
    Scheduling while a frame is pending cancels the old request first, and
    every request carries a generation number so a stale callback that still
    fires does nothing.
    """

    def __init__(self, request_frame: RequestFrame, cancel_frame: CancelFrame):
        self._request_frame = request_frame
        self._cancel_frame = cancel_frame
        self._handle: Optional[Any] = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: FrameCallback):
        self.cancel()
        self._generation += 1
        generation = self._generation

        def _fire():
            if generation != self._generation:
                return
            self._handle = None
            callback()

        self._handle = self._request_frame(_fire)

    def cancel(self):
        """Withdraw the pending frame; a no-op when nothing is pending"""
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        self._generation += 1
        self._cancel_frame(handle)
