"""Logging wrapper used by the connection, the transport and the resource clients.

Every component logs through a ``BoundLogger`` hanging off the ``arango``
logger (``arango.connection``, ``arango.graph`` ...). Messages below the
client's configured level are dropped before they reach ``logging``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOGGER_NAME = "arango"

# client level name -> (priority, stdlib level)
_LEVELS: dict[str, tuple[int, int]] = {
    "trace": (0, TRACE_LEVEL),
    "debug": (1, logging.DEBUG),
    "info": (2, logging.INFO),
    "warn": (3, logging.WARNING),
    "error": (4, logging.ERROR),
}

LOG_LEVEL_PRIORITY: dict[str, int] = {name: priority for name, (priority, _) in _LEVELS.items()}


class BoundLogger:
    """Filters messages by client log level, then hands them to ``logger``.

    ``logger`` is normally a ``logging.Logger``; any object exposing ``log`` or
    the per-level methods (``trace``, ``debug``, ``info``, ``warn``, ``error``)
    is accepted too.
    """

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._logger = logger or _default_logger()
        self._level = level
        self._threshold = _LEVELS[level][0]

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("trace", msg, args, kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("debug", msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("info", msg, args, kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("warn", msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("error", msg, args, kwargs)

    def child(self, name: str) -> "BoundLogger":
        """Logger for one component; stdlib loggers get a dotted child name."""
        if isinstance(self._logger, logging.Logger):
            return BoundLogger(self._logger.getChild(name), level=self._level)
        return BoundLogger(self._logger, level=self._level)

    def _emit(self, name: str, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        priority, level = _LEVELS[name]
        if priority < self._threshold:
            return
        try:
            log = getattr(self._logger, "log", None)
            if log is not None:
                log(level, msg, *args, **kwargs)
                return
            method = getattr(self._logger, name, None)
            if method is not None:
                method(msg, *args, **kwargs)
        except Exception:
            # Logging failures never reach client code
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LogLevel", "create_logger"]
