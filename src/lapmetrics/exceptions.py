"""Custom exceptions for the lap metrics library and its data client."""

from __future__ import annotations


class LapMetricsError(Exception):
    """Base exception for all lapmetrics errors."""


class LapMetricsTypeError(LapMetricsError, TypeError):
    """Raised when a core function receives an argument of the wrong type."""


class LapSequenceError(LapMetricsError, ValueError):
    """Raised when laps are not scoped or ordered the way an operation needs."""


class DataConnectionError(LapMetricsError):
    """Raised when the client cannot connect to the database API."""


class DataTimeoutError(LapMetricsError):
    """Raised when a request to the database API times out."""


class DataAPIError(LapMetricsError):
    """Raised when the database API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class DataValidationError(LapMetricsError):
    """Raised when API response rows fail model validation."""
