"""Engine and client loggers, plus verification helpers that log failures."""

from __future__ import annotations

import enum
import logging
import sys
from typing import ClassVar, Dict, Optional

from .config import is_debug_mode

CORE_LOGGER_NAME = "ASTRELIS"
CLIENT_LOGGER_NAME = "APP"

_PATTERN = "[%(asctime)s] %(name)s %(filename)s:%(lineno)d | %(message)s"
_TIME_FORMAT = "%H:%M:%S"


class LogMode(enum.IntFlag):
    NONE = 0
    CORE_ONLY = 1
    CLIENT_ONLY = 2
    FULL_LOGGING = 3


class Log:
    """The two engine loggers: core (engine) and client (application)."""

    _initialized: ClassVar[bool] = False
    _console_handlers: ClassVar[Dict[str, logging.Handler]] = {}

    @classmethod
    def init(cls, mode: LogMode = LogMode.FULL_LOGGING, level: Optional[int] = None) -> bool:
        """Set up both loggers; does nothing if already initialised."""
        if cls._initialized:
            return True
        mode = LogMode(mode)
        if level is None:
            level = logging.DEBUG if is_debug_mode() else logging.INFO

        for name, flag in (
            (CORE_LOGGER_NAME, LogMode.CORE_ONLY),
            (CLIENT_LOGGER_NAME, LogMode.CLIENT_ONLY),
        ):
            logger = logging.getLogger(name)
            previous = cls._console_handlers.pop(name, None)
            if previous is not None:
                logger.removeHandler(previous)
            if mode & flag:
                handler = logging.StreamHandler(sys.stdout)
                handler.setFormatter(logging.Formatter(_PATTERN, _TIME_FORMAT))
                logger.addHandler(handler)
                cls._console_handlers[name] = handler
            logger.setLevel(level)
            logger.propagate = False

        cls._initialized = True
        return True

    @classmethod
    def core_logger(cls) -> logging.Logger:
        return logging.getLogger(CORE_LOGGER_NAME)

    @classmethod
    def client_logger(cls) -> logging.Logger:
        return logging.getLogger(CLIENT_LOGGER_NAME)

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def set_initialized(cls, initialized: bool) -> None:
        cls._initialized = bool(initialized)

    @classmethod
    def add_core_sink(cls, sink: logging.Handler) -> None:
        cls.core_logger().addHandler(sink)

    @classmethod
    def remove_core_sink(cls, sink: logging.Handler) -> None:
        cls.core_logger().removeHandler(sink)

    @classmethod
    def add_client_sink(cls, sink: logging.Handler) -> None:
        cls.client_logger().addHandler(sink)

    @classmethod
    def remove_client_sink(cls, sink: logging.Handler) -> None:
        cls.client_logger().removeHandler(sink)


def _logger(core: bool) -> logging.Logger:
    return Log.core_logger() if core else Log.client_logger()


def verify(condition: object, message: str, core: bool = True) -> bool:
    """Log an error if condition is false; in debug mode also raise AssertionError."""
    if condition:
        return True
    _logger(core).error("Verification Failed: %s", message)
    if is_debug_mode():
        raise AssertionError(message)
    return False


def require(condition: object, message: str, core: bool = True) -> bool:
    """Log an error if condition is false; return whether it held."""
    if condition:
        return True
    _logger(core).error("Requirement Failed: %s", message)
    return False