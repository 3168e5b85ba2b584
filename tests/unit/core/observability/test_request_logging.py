"""Tests for HTTP request logging helpers."""

import json
import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from core.observability import register_http_request_logging, render_payload_preview


def test_preview_redacts_sensitive_keys():
    preview = render_payload_preview({"heartRate": 70, "api_key": "sk-secret", "nested": {"token": "t"}})

    decoded = json.loads(preview)
    assert decoded == {"heartRate": 70, "api_key": "***", "nested": {"token": "***"}}


def test_preview_handles_bytes_and_empty_values():
    assert render_payload_preview(None) == "<none>"
    assert render_payload_preview(b"") == "<empty>"
    assert json.loads(render_payload_preview(b'{"password": "x"}')) == {"password": "***"}
    assert render_payload_preview(b"not json") == "not json"


def test_preview_truncates_long_payloads():
    preview = render_payload_preview("x" * 5000)

    assert preview.endswith("(5000 bytes)")


@pytest.mark.anyio
async def test_middleware_logs_requests_and_skips_health(caplog):
    app = FastAPI()

    @app.post("/echo")
    async def echo(payload: dict) -> dict:
        return payload

    @app.get("/health")
    async def health() -> dict:
        return {"status": "healthy"}

    register_http_request_logging(app, logger_name="tests.http")

    with caplog.at_level(logging.INFO, logger="tests.http"):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            echoed = await client.post("/echo", json={"bedTime": "23:00"})
            await client.get("/health")

    assert echoed.json() == {"bedTime": "23:00"}
    messages = [record.getMessage() for record in caplog.records if record.name == "tests.http"]
    assert any(message.startswith("HTTP POST /echo -> 200") for message in messages)
    assert not any("/health" in message for message in messages)
