"""
Logging Hooks for Request/Response Logging

These httpx event hooks log every round trip made by the clients.
They capture:
- Request method and path
- Response status code
- Round-trip time

The hooks log to the ``spoome`` logger and install no handlers; the
application decides where records go. Failures are raised to the caller,
never logged here instead.
"""

import time
import logging

import httpx

logger = logging.getLogger("spoome")

_START_KEY = "spoome.start_time"


def _mark_start(request: httpx.Request) -> None:
    request.extensions[_START_KEY] = time.perf_counter()


def _log_response(response: httpx.Response) -> None:
    request = response.request
    start_time = request.extensions.get(_START_KEY)
    elapsed_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0.0

    # Format: METHOD PATH STATUS_CODE ELAPSED_MS
    logger.info(
        f"{request.method} {request.url.path} "
        f"{response.status_code} {elapsed_ms:.2f}ms"
    )


def log_request(request: httpx.Request) -> None:
    """Record the start time of a request (sync hook)."""
    _mark_start(request)


def log_response(response: httpx.Response) -> None:
    """Log a finished round trip (sync hook)."""
    _log_response(response)


async def alog_request(request: httpx.Request) -> None:
    """Record the start time of a request (async hook)."""
    _mark_start(request)


async def alog_response(response: httpx.Response) -> None:
    """Log a finished round trip (async hook)."""
    _log_response(response)


def logging_hooks(asynchronous: bool = False) -> dict:
    """
    Build the ``event_hooks`` mapping for an httpx client.

    Args:
        asynchronous: True for httpx.AsyncClient, which requires coroutine hooks

    Returns:
        Mapping suitable for ``httpx.Client(event_hooks=...)``
    """
    if asynchronous:
        return {"request": [alog_request], "response": [alog_response]}
    return {"request": [log_request], "response": [log_response]}
