"""HTTP transports for the hosted database's PostgREST endpoint."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx

from lapmetrics.exceptions import (
    DataAPIError,
    DataConnectionError,
    DataTimeoutError,
)

DEFAULT_TIMEOUT = 30.0
REST_PATH = "/rest/v1"

Params = list[tuple[str, str]]
Rows = list[dict[str, Any]]


def rest_base_url(project_url: str) -> str:
    """Return the REST endpoint root for a hosted project URL."""
    url = project_url.rstrip("/")
    return url if url.endswith(REST_PATH) else url + REST_PATH


def _client_options(project_url: str, api_key: str, timeout: float) -> dict[str, Any]:
    return {
        "base_url": rest_base_url(project_url),
        "timeout": timeout,
        "headers": {
            "Accept": "application/json",
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        },
    }


def _error_message(response: httpx.Response) -> str:
    """PostgREST errors carry a JSON body with a ``message``; fall back to text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text


def _rows(response: httpx.Response) -> Rows:
    if response.status_code >= 400:
        raise DataAPIError(status_code=response.status_code, message=_error_message(response))
    return response.json()  # type: ignore[no-any-return]


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except httpx.ConnectError as exc:
        raise DataConnectionError(str(exc)) from exc
    except httpx.TimeoutException as exc:
        raise DataTimeoutError(str(exc)) from exc


class SyncTransport:
    """Blocking transport backed by httpx.Client."""

    def __init__(self, project_url: str, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(**_client_options(project_url, api_key, timeout))

    def get(self, endpoint: str, params: Params) -> Rows:
        """GET a table endpoint and return its rows."""
        with _translate_errors():
            response = self._client.get(endpoint, params=params)
        return _rows(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Non-blocking transport backed by httpx.AsyncClient."""

    def __init__(self, project_url: str, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(**_client_options(project_url, api_key, timeout))

    async def get(self, endpoint: str, params: Params) -> Rows:
        """GET a table endpoint and return its rows."""
        with _translate_errors():
            response = await self._client.get(endpoint, params=params)
        return _rows(response)

    async def close(self) -> None:
        await self._client.aclose()
