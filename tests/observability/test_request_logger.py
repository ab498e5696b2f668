"""Tests for the request logging middleware and structlog setup."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from app.main import create_app
from app.observability.logging_config import setup_logging


class TestRequestLoggerMiddleware:
    def test_echoes_incoming_trace_id(self, client: TestClient) -> None:
        resp = client.get("/todos", headers={"X-Trace-ID": "trace-123"})
        assert resp.headers["X-Trace-ID"] == "trace-123"

    def test_generates_trace_id(self, client: TestClient) -> None:
        resp = client.get("/todos")
        uuid.UUID(resp.headers["X-Trace-ID"])

    def test_duration_header(self, client: TestClient) -> None:
        resp = client.get("/todos")
        assert int(resp.headers["X-Duration-Ms"]) >= 0

    def test_headers_on_error_responses(self, client: TestClient) -> None:
        resp = client.get(f"/todos/{uuid.uuid4()}", headers={"X-Trace-ID": "t-404"})
        assert resp.status_code == 404
        assert resp.headers["X-Trace-ID"] == "t-404"


class TestTraceContext:
    @pytest.fixture
    def context_client(self) -> Iterator[TestClient]:
        application = create_app()

        def read_context() -> dict:
            return structlog.contextvars.get_contextvars()

        application.add_api_route("/_context", read_context, methods=["GET"])
        with TestClient(application) as c:
            yield c

    def test_trace_id_bound_for_handlers(self, context_client: TestClient) -> None:
        resp = context_client.get("/_context", headers={"X-Trace-ID": "trace-abc"})
        assert resp.json()["trace_id"] == "trace-abc"

    def test_each_request_gets_own_trace_id(self, context_client: TestClient) -> None:
        first = context_client.get("/_context").json()["trace_id"]
        second = context_client.get("/_context").json()["trace_id"]
        uuid.UUID(first)
        assert first != second


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_structlog(self) -> Iterator[None]:
        root = logging.getLogger()
        original_handlers = root.handlers[:]
        original_level = root.level
        yield
        root.handlers = original_handlers
        root.setLevel(original_level)
        setup_logging()

    def test_production_renders_json(self) -> None:
        setup_logging(env="production")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        setup_logging(env="development")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_trace_id_merged_from_contextvars(self) -> None:
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars

    def test_level_filters_bound_logger(self) -> None:
        setup_logging(level="warning")
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)

    def test_default_level_is_info(self) -> None:
        setup_logging()
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.INFO)

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            setup_logging(level="loud")
