"""An in-memory console that keeps the latest client log messages."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from .log import Log


class ConsoleSink(logging.Handler):
    """A log handler that keeps the newest max_messages message texts."""

    def __init__(self, max_messages: int = 100) -> None:
        super().__init__()
        if max_messages < 0:
            raise ValueError("max_messages must not be negative")
        self._messages: Deque[str] = deque(maxlen=max_messages)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._messages.append(record.getMessage())
        except Exception:
            self.handleError(record)

    @property
    def messages(self) -> List[str]:
        return list(self._messages)


class Console:
    """Collects client log messages while open."""

    def __init__(self, max_messages: int = 100) -> None:
        self._sink = ConsoleSink(max_messages)
        self._closed = False
        Log.add_client_sink(self._sink)
        Log.core_logger().info("Console Started!")

    @property
    def messages(self) -> List[str]:
        return self._sink.messages

    def render(self) -> str:
        """The collected messages, one per line."""
        return "\n".join(self._sink.messages)

    def close(self) -> None:
        if not self._closed:
            Log.remove_client_sink(self._sink)
            self._closed = True

    def __enter__(self) -> "Console":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()