"""
Async spoo.me Client

Coroutine-based client built on httpx.AsyncClient. Each method performs a
single request/response round trip; running calls concurrently is up to
the caller (e.g. ``asyncio.gather``).

Example:
    async with AsyncSpoomeClient() as client:
        result = await client.shorten(ShortenRequest(url="https://example.com", alias="docs"))
        print(result.short_url)
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


class AsyncSpoomeClient(BaseSpoomeClient):
    """
    Asynchronous client for the spoo.me API.

    Pass ``http_client`` to reuse an existing httpx.AsyncClient (the caller
    keeps ownership), or ``transport`` to customise the one built here.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        api_key_header: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url, api_key=api_key, api_key_header=api_key_header, timeout=timeout)
        if http_client is not None:
            self._client = http_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(
                transport=transport,
                timeout=self.timeout,
                event_hooks=logging_hooks(asynchronous=True),
            )
            self._owns_client = True

    async def __aenter__(self) -> "AsyncSpoomeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it was built by this client."""
        if self._owns_client:
            await self._client.aclose()

    async def _send(self, call: PreparedCall) -> httpx.Response:
        try:
            return await self._client.request(
                call.method,
                self._url(call.path),
                data=call.data,
                headers=self._headers(),
            )
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable response body: {e}", original_error=e) from e
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__, original_error=e) from e

    async def shorten(self, request: ShortenRequest) -> ShortenResponse:
        """
        Create a short link.

        Raises:
            InvalidRequestError: password, URL, alias or max_clicks is invalid
            ApiError: the service rejected the request
            TransportError: the request could not be sent
            DecodeError: the response was not a ShortenResponse
        """
        call = self._prepare_shorten(request)
        response = await self._send(call)
        return self._parse(response, ShortenResponse)

    async def emoji(self, request: EmojiRequest) -> EmojiResponse:
        """Create a short link whose slug is a sequence of emojis."""
        call = self._prepare_emoji(request)
        response = await self._send(call)
        return self._parse(response, EmojiResponse)

    async def stats(self, request: StatsRequest) -> StatsResponse:
        """Fetch click statistics for a short link."""
        call = self._prepare_stats(request)
        response = await self._send(call)
        return self._parse(response, StatsResponse)

    async def export(self, request: ExportRequest) -> ExportResponse:
        """Download the statistics of a short link as a file."""
        call = self._prepare_export(request)
        response = await self._send(call)
        return self._parse_export(response)
