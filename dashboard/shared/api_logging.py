"""Call logging for the dashboard's repository and service layers.

Repository calls are logged with the number of rows they returned, service
calls with how long they took. Both write to ``api_calls.log``, which is
created on first use under ``LAPMETRICS_LOG_DIR`` or ``dashboard/logs``.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "telemetry_dashboard.api"
LOG_FILENAME = "api_calls.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_log_path = Path(
    os.environ.get("LAPMETRICS_LOG_DIR") or Path(__file__).resolve().parent.parent / "logs",
) / LOG_FILENAME
_handler_lock = threading.Lock()


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def set_log_dir(path: str | os.PathLike[str]) -> None:
    """Send subsequent log lines to ``<path>/api_calls.log``.

    The open log file is kept when the directory is unchanged.
    """
    global _log_path
    log_path = Path(path) / LOG_FILENAME
    with _handler_lock:
        if log_path == _log_path:
            return
        _log_path = log_path
        _drop_handlers(logging.getLogger(LOGGER_NAME))


def _get_logger() -> logging.Logger:
    """Return the file logger, opening the log file on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    with _handler_lock:
        if not logger.handlers:
            _log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(_log_path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
    return logger


def _describe_call(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return f"{fn.__qualname__}({', '.join(parts)})"


def _row_count(result: Any) -> int:
    """Rows in a repository result; per-driver mappings count every lap."""
    if isinstance(result, dict):
        return sum(_row_count(rows) for rows in result.values())
    if isinstance(result, list):
        return len(result)
    return 1


def log_api_call(fn: F) -> F:
    """Log a repository call with its arguments, row count and duration."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        call = _describe_call(fn, args, kwargs)
        logger.info("CALL: %s", call)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                call, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info(
            "OK: %s -> %d rows (%.3fs)", call, _row_count(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service-layer call and how long it took."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        logger.info("SERVICE CALL: %s", _describe_call(fn, args, kwargs))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info("SERVICE OK: %s (%.3fs)", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
