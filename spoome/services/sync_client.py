"""
Blocking spoo.me Client

Same surface as AsyncSpoomeClient, built on httpx.Client. Calls run on the
calling thread.
"""

from typing import Optional

import httpx

from spoome.api.schemas import (
    EmojiRequest,
    EmojiResponse,
    ExportRequest,
    ExportResponse,
    ShortenRequest,
    ShortenResponse,
    StatsRequest,
    StatsResponse,
)
from spoome.core.exceptions import DecodeError, TransportError
from spoome.middleware.logging import logging_hooks
from spoome.services.base import BaseSpoomeClient, PreparedCall


class SpoomeClient(BaseSpoomeClient):
    """Blocking client for the spoo.me API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        api_key_header: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(base_url, api_key=api_key, api_key_header=api_key_header, timeout=timeout)
        if http_client is not None:
            self._client = http_client
            self._owns_client = False
        else:
            self._client = httpx.Client(
                transport=transport,
                timeout=self.timeout,
                event_hooks=logging_hooks(),
            )
            self._owns_client = True

    def __enter__(self) -> "SpoomeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if it was built by this client."""
        if self._owns_client:
            self._client.close()

    def _send(self, call: PreparedCall) -> httpx.Response:
        try:
            return self._client.request(
                call.method,
                self._url(call.path),
                data=call.data,
                headers=self._headers(),
            )
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable response body: {e}", original_error=e) from e
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__, original_error=e) from e

    def shorten(self, request: ShortenRequest) -> ShortenResponse:
        """
        Create a short link.

        Raises:
            InvalidRequestError: password, URL, alias or max_clicks is invalid
            ApiError: the service rejected the request
            TransportError: the request could not be sent
            DecodeError: the response was not a ShortenResponse
        """
        return self._parse(self._send(self._prepare_shorten(request)), ShortenResponse)

    def emoji(self, request: EmojiRequest) -> EmojiResponse:
        return self._parse(self._send(self._prepare_emoji(request)), EmojiResponse)

    def stats(self, request: StatsRequest) -> StatsResponse:
        return self._parse(self._send(self._prepare_stats(request)), StatsResponse)

    def export(self, request: ExportRequest) -> ExportResponse:
        """Download the statistics of a short link as a file."""
        return self._parse_export(self._send(self._prepare_export(request)))
