"""Progress accounting for uploads.

This module provides:
- ProgressEvent: One progress notification
- ProgressObserver: Interface receiving progress events
- CallbackObserver: Adapts a plain (total, uploaded, percent) callable
- ProgressTracker: Turns cumulative byte counts into sparse 10% events
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ProgressEvent:
    """Progress information for an upload."""

    total_bytes: int
    uploaded_bytes: int
    percent: int


class ProgressObserver(Protocol):
    """Receives progress events emitted during an upload."""

    def on_progress(self, event: ProgressEvent) -> None:
        """Handle a progress event."""
        ...


# Type alias for legacy-style progress callbacks
ProgressCallback = Callable[[int, int, int], None]


class CallbackObserver:
    """Observer forwarding events to a (total, uploaded, percent) callable."""

    def __init__(self, callback: ProgressCallback) -> None:
        self._callback = callback

    def on_progress(self, event: ProgressEvent) -> None:
        self._callback(event.total_bytes, event.uploaded_bytes, event.percent)


def compute_percent(total_bytes: int, uploaded_bytes: int) -> int:
    """Return ceil(uploaded / total * 100) using integer arithmetic."""
    if total_bytes <= 0:
        return 100
    return -(-uploaded_bytes * 100 // total_bytes)


class ProgressTracker:
    """Emits progress events on 10% steps.

    An event is emitted when the percentage is a multiple of 10 and
    differs from the last emitted one, or unconditionally for the very
    first computation. The comparison is exact (percent % 10 == 0), so a
    10% step skipped over by a large read is never reported.
    """

    def __init__(self, observer: ProgressObserver | None = None) -> None:
        self._observer = observer
        self._last_percent: int | None = None

    @property
    def last_percent(self) -> int | None:
        """Last emitted percentage, or None if nothing was reported yet."""
        return self._last_percent

    def update(self, total_bytes: int, uploaded_bytes: int) -> ProgressEvent | None:
        """Record the cumulative byte count and emit an event if due.

        Args:
            total_bytes: Total bytes of the transfer.
            uploaded_bytes: Bytes transferred so far.

        Returns:
            The emitted event, or None if the update was suppressed.
        """
        percent = compute_percent(total_bytes, uploaded_bytes)
        first = self._last_percent is None
        if not (percent % 10 == 0 or first) or percent == self._last_percent:
            return None

        self._last_percent = percent
        event = ProgressEvent(
            total_bytes=total_bytes,
            uploaded_bytes=uploaded_bytes,
            percent=percent,
        )
        if self._observer is not None:
            self._observer.on_progress(event)
        return event
