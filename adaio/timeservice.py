"""Subscription to the broker's time topics."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from adaio.transport import Subscription

__all__ = ["TimeFormat", "TimeService"]

TimeCallback = Callable[[str], None]


class TimeFormat(Enum):
    """Formats published by the time service, named by their topic suffix."""

    SECONDS = "seconds"
    MILLIS = "millis"
    ISO = "ISO-8601"


class TimeService:
    """Receives the current time on ``time/<format>`` and passes it on."""

    def __init__(self, io: Any, format: TimeFormat | str = TimeFormat.SECONDS) -> None:
        self.io = io
        self.format = TimeFormat(format)
        self.topic = f"time/{self.format.value}"
        self.data: str | None = None
        self._callback: TimeCallback | None = None
        self.subscription = Subscription(self.topic, self.sub_callback)
        io.mqtt.subscribe(self.subscription)

    def on_message(self, callback: TimeCallback | None) -> None:
        """Set the function called with each time message."""
        self._callback = callback

    def sub_callback(self, payload: str) -> None:
        """Store an incoming time message and hand it to the callback."""
        self.data = payload
        if self._callback is not None:
            self._callback(payload)