"""
Tests for structured logging and the request logging middleware
"""

import json
import logging
import sys

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from marketing_site.middleware.locale import LocaleRedirectMiddleware
from marketing_site.middleware.logging import (
    RequestIdFilter,
    StructuredFormatter,
    StructuredLoggingMiddleware,
    get_request_id,
    request_id_var,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("marketing_site.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_json_line(self):
        data = json.loads(StructuredFormatter().format(_record(request_id="abc")))
        assert data["level"] == "INFO"
        assert data["logger"] == "marketing_site.test"
        assert data["message"] == "hello"
        assert data["request_id"] == "abc"
        assert "timestamp" in data

    def test_extra_fields(self):
        record = _record(method="GET", path="/pricing", status_code=307, locale=None, redirect_to="/pt/pricing")
        data = json.loads(StructuredFormatter().format(record))
        assert data["status_code"] == 307
        assert data["redirect_to"] == "/pt/pricing"
        assert data["locale"] is None

    def test_unicode_kept(self):
        data = json.loads(StructuredFormatter().format(_record("Português")))
        assert data["message"] == "Português"

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        data = json.loads(StructuredFormatter().format(record))
        assert "ValueError: bad" in data["exception"]


class TestRequestId:
    def test_filter_adds_request_id(self):
        token = request_id_var.set("req-42")
        try:
            record = _record()
            assert RequestIdFilter().filter(record) is True
            assert record.request_id == "req-42"
            assert get_request_id() == "req-42"
        finally:
            request_id_var.reset(token)


class TestStructuredLoggingMiddleware:
    @pytest.fixture
    def logged_client(self):
        app = FastAPI()

        @app.get("/{locale}/pricing")
        async def pricing(locale: str):
            return {"locale": locale}

        @app.get("/health")
        async def health():
            return {"status": "ok"}

        app.add_middleware(LocaleRedirectMiddleware)
        app.add_middleware(StructuredLoggingMiddleware)
        return TestClient(app, follow_redirects=False)

    def test_request_id_generated(self, logged_client):
        response = logged_client.get("/en/pricing")
        assert response.status_code == 200
        assert response.headers["X-Request-ID"]

    def test_request_id_propagated(self, logged_client):
        response = logged_client.get("/en/pricing", headers={"X-Request-ID": "given"})
        assert response.headers["X-Request-ID"] == "given"

    def test_access_line_has_locale(self, logged_client, caplog):
        with caplog.at_level(logging.INFO, logger="site.access"):
            logged_client.get("/fr/pricing")

        records = [r for r in caplog.records if r.name == "site.access"]
        assert len(records) == 1
        assert records[0].locale == "fr"
        assert records[0].status_code == 200

    def test_redirect_is_logged_with_target(self, logged_client, caplog):
        with caplog.at_level(logging.INFO, logger="site.access"):
            logged_client.get("/pricing", headers={"Accept-Language": "en"})

        records = [r for r in caplog.records if r.name == "site.access"]
        assert records[0].status_code == 307
        assert records[0].redirect_to == "/en/pricing"

    def test_health_is_quiet(self, logged_client, caplog):
        with caplog.at_level(logging.INFO, logger="site.access"):
            logged_client.get("/health")

        assert not [r for r in caplog.records if r.name == "site.access"]
