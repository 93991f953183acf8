"""
Python client for the spoo.me URL shortener.

Works with the public service and with self-hosted instances (set
``base_url`` or the ``SPOOME_BASE_URL`` environment variable).

Two clients share the same request/response models:
- AsyncSpoomeClient: coroutine methods on httpx.AsyncClient
- SpoomeClient: blocking methods on httpx.Client
"""

from spoome.api.schemas import (
    EmojiRequest,
    EmojiResponse,
    ErrorResponse,
    ExportFormat,
    ExportRequest,
    ExportResponse,
    ShortenRequest,
    ShortenResponse,
    StatsRequest,
    StatsResponse,
)
from spoome.core.exceptions import (
    ApiError,
    ApiErrorCode,
    DecodeError,
    InvalidRequestError,
    SpoomeError,
    TransportError,
)
from spoome.core.setting import Settings, settings, __version__
from spoome.services.async_client import AsyncSpoomeClient
from spoome.services.sync_client import SpoomeClient

__all__ = [
    "AsyncSpoomeClient",
    "SpoomeClient",
    "ShortenRequest",
    "ShortenResponse",
    "EmojiRequest",
    "EmojiResponse",
    "StatsRequest",
    "StatsResponse",
    "ExportFormat",
    "ExportRequest",
    "ExportResponse",
    "ErrorResponse",
    "SpoomeError",
    "InvalidRequestError",
    "ApiError",
    "ApiErrorCode",
    "TransportError",
    "DecodeError",
    "Settings",
    "settings",
    "__version__",
]
