"""
Shared fixtures: an in-process fake of the spoo.me service.

The fake is a small FastAPI app implementing the endpoints the clients use.
Async tests reach it through httpx.ASGITransport, blocking tests through
FastAPI's TestClient (an httpx.Client), so no test touches the network.
"""

import json
from typing import Dict, List

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.testclient import TestClient

from spoome import AsyncSpoomeClient, SpoomeClient


def create_fake_service() -> FastAPI:
    """Build a fake spoo.me app; received forms are kept in ``app.state.received``."""
    app = FastAPI()
    app.state.received = []
    links: Dict[str, dict] = {
        "ga": {"url": "https://google.com", "password": None},
    }

    def _origin(request: Request) -> str:
        return str(request.base_url).rstrip("/")

    async def _record(request: Request, path: str) -> Dict[str, str]:
        form = dict(await request.form())
        app.state.received.append({"path": path, "form": form, "headers": dict(request.headers)})
        return form

    @app.post("/")
    async def shorten(request: Request):
        form = await _record(request, "/")
        code = form.get("alias") or "abc123"
        if code in links:
            return JSONResponse({"AliasError": "Alias already exists"}, status_code=400)
        links[code] = {"url": form["url"], "password": form.get("password")}
        return {
            "short_url": f"{_origin(request)}/{code}",
            "domain": request.url.netloc,
            "original_url": form["url"],
        }

    @app.post("/emoji")
    async def emoji(request: Request):
        form = await _record(request, "/emoji")
        code = form.get("emojies") or "🐍🚀"
        links[code] = {"url": form["url"], "password": form.get("password")}
        return {
            "short_url": f"{_origin(request)}/{code}",
            "domain": request.url.netloc,
            "original_url": form["url"],
        }

    @app.post("/stats/{short_code}")
    async def stats(short_code: str, request: Request):
        form = await _record(request, f"/stats/{short_code}")
        link = links.get(short_code)
        if link is None:
            return JSONResponse({"UrlError": "The requested Url never existed"}, status_code=404)
        if link["password"] and form.get("password") != link["password"]:
            return JSONResponse({"PasswordError": "Invalid password"}, status_code=401)
        return {
            "short_code": short_code,
            "url": link["url"],
            "total-clicks": 42,
            "total_unique_clicks": 30,
            "creation-date": "2024-05-01",
            "expired": False,
            "last-click": "2024-06-01 10:00:00",
            "last-click-browser": "Chrome",
            "last-click-os": "Linux",
            "max-clicks": None,
            "password": link["password"],
            "block_bots": False,
            "browser": {"Chrome": 30, "Firefox": 12},
            "counter": {"2024-05-01": 40, "2024-06-01": 2},
            "referrer": {"news.ycombinator.com": 7},
            "average_daily_clicks": 1.4,
        }

    @app.post("/export/{short_code}/{export_format}")
    async def export(short_code: str, export_format: str, request: Request):
        await _record(request, f"/export/{short_code}/{export_format}")
        if short_code not in links:
            return JSONResponse({"UrlError": "The requested Url never existed"}, status_code=404)
        if export_format == "csv":
            content, media_type, filename = b"PK\x03\x04fake-zip", "application/zip", f"{short_code}.zip"
        else:
            content = json.dumps({"short_code": short_code, "total-clicks": 42}).encode()
            media_type, filename = "application/json", f"{short_code}.json"
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


class RecordingHandler:
    """httpx.MockTransport handler returning a canned response and keeping the requests."""

    def __init__(self, status_code: int = 200, json_body=None, content: bytes = None, headers=None):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.headers = headers
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        return httpx.Response(self.status_code, json=self.json_body, headers=self.headers)


def unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)


@pytest.fixture
def fake_service() -> FastAPI:
    return create_fake_service()


@pytest.fixture
def sync_client(fake_service):
    with TestClient(fake_service) as http_client:
        yield SpoomeClient(http_client=http_client)


@pytest_asyncio.fixture
async def async_client(fake_service):
    transport = httpx.ASGITransport(app=fake_service)
    async with AsyncSpoomeClient(transport=transport) as client:
        yield client


@pytest.fixture
def shorten_ok() -> RecordingHandler:
    return RecordingHandler(json_body={
        "short_url": "https://spoo.me/docs",
        "domain": "spoo.me",
        "original_url": "https://example.com/long/url",
    })


@pytest.fixture
def make_handler():
    return RecordingHandler


@pytest.fixture
def unreachable_transport() -> httpx.MockTransport:
    return httpx.MockTransport(unreachable)
