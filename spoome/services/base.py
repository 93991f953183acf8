"""
Shared Client Logic

This module holds everything the async and blocking clients have in common:
- Connection configuration (base URL, API key, timeout)
- Request validation and construction for every endpoint
- Mapping HTTP responses onto models or exceptions

The concrete clients only perform the I/O, so both expose the same
behaviour for the same inputs.
"""

import re
from typing import Dict, NamedTuple, Optional, Type, TypeVar
from urllib.parse import unquote

import httpx
from pydantic import BaseModel, ValidationError

from spoome.api.schemas import (
    EmojiRequest,
    ErrorResponse,
    ExportFormat,
    ExportRequest,
    ExportResponse,
    ShortenRequest,
    StatsRequest,
)
from spoome.core.exceptions import ApiError, DecodeError, InvalidRequestError
from spoome.core.setting import settings
from spoome.core.validators import (
    is_valid_alias,
    is_valid_emoji_sequence,
    is_valid_max_clicks,
    is_valid_password,
    is_valid_url,
)

ModelT = TypeVar("ModelT", bound=BaseModel)

# RFC 5987 extended value: filename*=<charset>'<lang>'<percent-encoded>
_FILENAME_EXT_RE = re.compile(r"filename\*\s*=\s*([^']*)'[^']*'([^;]+)", re.IGNORECASE)
_FILENAME_RE = re.compile(r'filename\s*=\s*"?([^";]+)"?', re.IGNORECASE)


def filename_from_disposition(disposition: str) -> Optional[str]:
    """
    Extract the file name from a Content-Disposition header.

    The extended ``filename*`` form is preferred and percent-decoded; the
    plain ``filename`` form is used otherwise.
    """
    match = _FILENAME_EXT_RE.search(disposition)
    if match:
        charset = match.group(1).strip() or "utf-8"
        value = match.group(2).strip().strip('"')
        try:
            return unquote(value, encoding=charset, errors="replace")
        except LookupError:
            return unquote(value, errors="replace")
    match = _FILENAME_RE.search(disposition)
    if match:
        return match.group(1).strip()
    return None


class PreparedCall(NamedTuple):
    """A validated request, ready to be sent."""
    method: str
    path: str
    data: Dict[str, str]


class BaseSpoomeClient:
    """
    Configuration and request/response mapping shared by both clients.

    Subclasses provide the transport (httpx.Client or httpx.AsyncClient)
    and one method per endpoint that sends a PreparedCall.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        api_key_header: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize client configuration.

        Args:
            base_url: Origin of the service (defaults to settings.BASE_URL)
            api_key: Optional API key (defaults to settings.API_KEY)
            api_key_header: Header carrying the key (defaults to settings.API_KEY_HEADER)
            timeout: Timeout in seconds for the HTTP client built by the library
        """
        self._base_url = (base_url or settings.BASE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.API_KEY
        self.api_key_header = api_key_header or settings.API_KEY_HEADER
        self.timeout = timeout if timeout is not None else settings.TIMEOUT

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._base_url = url.rstrip("/")

    def set_base_url(self, url: str) -> None:
        """Point all subsequent calls at another instance."""
        self.base_url = url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": settings.USER_AGENT,
        }
        if self.api_key:
            if self.api_key_header.lower() == "authorization":
                headers[self.api_key_header] = f"Bearer {self.api_key}"
            else:
                headers[self.api_key_header] = self.api_key
        return headers

    # Validation

    def _check_password(self, password: Optional[str]) -> None:
        if password is not None and not is_valid_password(password):
            raise InvalidRequestError("password", password, "Invalid password format")

    def _check_url(self, url: str) -> None:
        if not is_valid_url(url, self._base_url):
            raise InvalidRequestError("url", url, "Invalid URL format")

    def _check_max_clicks(self, max_clicks: Optional[int]) -> None:
        if max_clicks is not None and not is_valid_max_clicks(max_clicks):
            raise InvalidRequestError("max_clicks", max_clicks, "Max clicks must be a positive integer")

    def _check_short_code(self, short_code: str) -> None:
        if not short_code:
            raise InvalidRequestError("short_code", short_code, "Short code cannot be empty")
        if not is_valid_alias(short_code):
            raise InvalidRequestError("short_code", short_code, "Invalid short code format")

    # Request construction

    def _prepare_shorten(self, request: ShortenRequest) -> PreparedCall:
        self._check_password(request.password)
        self._check_url(request.url)
        if request.alias is not None and not is_valid_alias(request.alias):
            raise InvalidRequestError("alias", request.alias, "Invalid alias format")
        self._check_max_clicks(request.max_clicks)
        return PreparedCall("POST", "/", request.to_form())

    def _prepare_emoji(self, request: EmojiRequest) -> PreparedCall:
        self._check_password(request.password)
        self._check_url(request.url)
        if request.emojies is not None and not is_valid_emoji_sequence(request.emojies):
            raise InvalidRequestError("emojies", request.emojies, "Invalid emoji sequence")
        self._check_max_clicks(request.max_clicks)
        return PreparedCall("POST", "/emoji", request.to_form())

    def _prepare_stats(self, request: StatsRequest) -> PreparedCall:
        self._check_short_code(request.short_code)
        self._check_password(request.password)
        return PreparedCall("POST", f"/stats/{request.short_code}", request.to_form())

    def _prepare_export(self, request: ExportRequest) -> PreparedCall:
        self._check_short_code(request.short_code)
        self._check_password(request.password)
        export_format = ExportFormat(request.export_format)
        return PreparedCall(
            "POST", f"/export/{request.short_code}/{export_format.value}", request.to_form()
        )

    # Response mapping

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """
        Raise ApiError for any non-2xx response.

        Understands both ``{"error": "<Code>", "message": "..."}`` and the
        service's ``{"<Code>": "<message>"}`` bodies. Anything else keeps the
        raw text as message and no error code.
        """
        if response.is_success:
            return

        text = response.text
        error = None
        message = text or response.reason_phrase

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            if isinstance(payload.get("error"), str):
                error = payload["error"]
                message = str(payload.get("message") or error)
            else:
                codes = [key for key in payload if key.endswith("Error")]
                if len(codes) == 1:
                    error = codes[0]
                    message = str(payload[error])

        body = ErrorResponse(error=error, message=message, status_code=response.status_code)
        raise ApiError(body.status_code, body.message, error=body.error, body=text)

    def _parse(self, response: httpx.Response, model: Type[ModelT]) -> ModelT:
        self._raise_for_status(response)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Response does not match {model.__name__}: {e.error_count()} error(s)",
                body=response.text,
                original_error=e,
            ) from e

    def _parse_export(self, response: httpx.Response) -> ExportResponse:
        self._raise_for_status(response)
        disposition = response.headers.get("content-disposition")
        filename = filename_from_disposition(disposition) if disposition else None
        return ExportResponse(
            data=response.content,
            content_type=response.headers.get("content-type"),
            filename=filename,
        )
