"""
Client layer.

BaseSpoomeClient validates and builds requests and maps responses;
AsyncSpoomeClient and SpoomeClient only perform the I/O.
"""

from spoome.services.async_client import AsyncSpoomeClient
from spoome.services.sync_client import SpoomeClient

__all__ = [
    "AsyncSpoomeClient",
    "SpoomeClient",
]
