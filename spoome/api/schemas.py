"""
API Request and Response Schemas

This module defines the Pydantic models for every spoo.me endpoint.
They are shared by the async and the blocking client.

Design Principles:
- Request models: Field names are Pythonic, wire names are aliases
  (``max_clicks`` is sent as ``max-clicks``); both are accepted on input
- Response models: Unknown keys are ignored so newer servers keep working
- Path parameters (short codes, export format) are excluded from form bodies
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FormModel(BaseModel):
    """Base for request models sent as form-encoded bodies."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_form(self) -> Dict[str, str]:
        """
        Serialize to form fields using wire names.

        Unset fields are omitted; booleans become ``true`` / ``false``.
        """
        form = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                form[key] = "true" if value else "false"
            else:
                form[key] = str(value)
        return form


class ShortenRequest(FormModel):
    """Request model for ``POST /``."""
    url: str = Field(..., description="The long URL to shorten")
    alias: Optional[str] = Field(default=None, description="Custom alias for the short link")
    password: Optional[str] = Field(default=None, description="Password protecting the link")
    max_clicks: Optional[int] = Field(
        default=None, alias="max-clicks", strict=True, description="Clicks after which the link expires"
    )
    block_bots: Optional[bool] = Field(
        default=None, alias="block-bots", description="Refuse redirects to known bots"
    )


class EmojiRequest(FormModel):
    """Request model for ``POST /emoji``."""
    url: str = Field(..., description="The long URL to shorten")
    emojies: Optional[str] = Field(default=None, description="Custom emoji slug")
    password: Optional[str] = None
    max_clicks: Optional[int] = Field(default=None, alias="max-clicks", strict=True)
    block_bots: Optional[bool] = Field(default=None, alias="block-bots")


class ShortenResponse(BaseModel):
    """Response model for the shortening endpoints."""
    model_config = ConfigDict(extra="ignore")

    short_url: str = Field(..., description="The complete short URL")
    domain: Optional[str] = Field(default=None, description="Domain serving the short URL")
    original_url: Optional[str] = Field(default=None, description="The URL that was shortened")


class EmojiResponse(ShortenResponse):
    """Response model for ``POST /emoji``."""


class StatsRequest(FormModel):
    """Request model for ``POST /stats/{short_code}``."""
    short_code: str = Field(..., exclude=True, description="Short code of the link")
    password: Optional[str] = Field(default=None, description="Password if the link has one")


class StatsResponse(BaseModel):
    """Response model for ``POST /stats/{short_code}``."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    short_code: str
    url: str
    total_clicks: int = Field(..., alias="total-clicks")
    total_unique_clicks: int
    creation_date: Optional[str] = Field(default=None, alias="creation-date")
    expired: Optional[bool] = None
    last_click: Optional[str] = Field(default=None, alias="last-click")
    last_click_browser: Optional[str] = Field(default=None, alias="last-click-browser")
    last_click_os: Optional[str] = Field(default=None, alias="last-click-os")
    max_clicks: Optional[int] = Field(default=None, alias="max-clicks")
    password: Optional[str] = None
    block_bots: Optional[bool] = None

    # Breakdowns: key -> click count
    bots: Optional[Dict[str, int]] = None
    browser: Optional[Dict[str, int]] = None
    country: Optional[Dict[str, int]] = None
    counter: Optional[Dict[str, int]] = None
    os_name: Optional[Dict[str, int]] = None
    referrer: Optional[Dict[str, int]] = None
    unique_browser: Optional[Dict[str, int]] = None
    unique_country: Optional[Dict[str, int]] = None
    unique_counter: Optional[Dict[str, int]] = None
    unique_os_name: Optional[Dict[str, int]] = None
    unique_referrer: Optional[Dict[str, int]] = None


class ExportFormat(str, Enum):
    """Formats offered by the export endpoint."""
    JSON = "json"
    CSV = "csv"  # zipped CSV files
    XLSX = "xlsx"
    XML = "xml"

    def __str__(self) -> str:
        return self.value


class ExportRequest(FormModel):
    """Request model for ``POST /export/{short_code}/{export_format}``."""
    short_code: str = Field(..., exclude=True)
    export_format: ExportFormat = Field(default=ExportFormat.JSON, exclude=True)
    password: Optional[str] = None


class ExportResponse(BaseModel):
    """Raw export returned by the service."""
    data: bytes
    content_type: Optional[str] = None
    filename: Optional[str] = None

    def save_to_file(self, path: Union[str, Path]) -> Path:
        """
        Write the export data to a file.

        Args:
            path: Destination file path

        Returns:
            The path written to
        """
        target = Path(path)
        target.write_bytes(self.data)
        return target


class ErrorResponse(BaseModel):
    """Structured error body returned with non-2xx statuses."""
    model_config = ConfigDict(extra="ignore")

    error: Optional[str] = None
    message: str
    status_code: int
