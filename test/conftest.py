"""
Pytest configuration and fixtures for the marketing site tests
"""

import os
import sys
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from marketing_site.cms.client import CMSClient, get_cms_client  # noqa: E402
from main import app  # noqa: E402

CMS_TEST_URL = "https://cms.test"


class FakeCMS:
    """
    In-memory stand-in for the Strapi API, served through httpx.MockTransport.

    ``routes`` maps an API route ("home-page", "blogs") to the JSON body
    returned for it, or to an int status code to simulate an error.
    ``requests`` records every request made.
    """

    def __init__(self):
        self.routes: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []
        self.down = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)

        route = request.url.path.removeprefix("/api/")
        body = self.routes.get(route)
        if body is None:
            return httpx.Response(404, json={"data": None, "error": {"status": 404, "name": "NotFoundError"}})
        if isinstance(body, int):
            return httpx.Response(body, json={"data": None})
        if callable(body):
            return httpx.Response(200, json=body(request))
        return httpx.Response(200, json=body)

    def client(self) -> CMSClient:
        return CMSClient(base_url=CMS_TEST_URL, token="", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_cms() -> FakeCMS:
    return FakeCMS()


@pytest.fixture
def client(fake_cms: FakeCMS):
    """TestClient for the full app, CMS replaced by ``fake_cms``, redirects not followed."""
    app.dependency_overrides[get_cms_client] = fake_cms.client
    try:
        yield TestClient(app, follow_redirects=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def cms_body() -> Callable[..., dict[str, Any]]:
    """Wrap entries in the Strapi response envelope."""

    def _wrap(data: Any, meta: dict[str, Any] | None = None) -> dict[str, Any]:
        return {"data": data, "meta": meta or {}}

    return _wrap
