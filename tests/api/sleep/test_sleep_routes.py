from __future__ import annotations

import json
from typing import Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from core.clients import ai
from core.exceptions import ConfigurationError, ProviderError, RateLimitError
from features.sleep.dependencies import get_analysis_provider
from main import app


@pytest.fixture(autouse=True)
def reset_dependency_overrides() -> Iterator[None]:
    """Ensure dependency overrides do not leak between tests."""

    try:
        yield
    finally:
        app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


FORM_PAYLOAD = {
    "melatoninLevel": 20,
    "heartRate": 88,
    "bedTime": "01:00",
    "wakeTime": "06:00",
    "age": "",
    "caffeineAfternoon": "sometimes",
}


@pytest.mark.anyio
async def test_analyze_returns_envelope_with_merged_stress(stub_provider_factory) -> None:
    provider = stub_provider_factory(text=json.dumps({"sleepVerdict": "Sleep more.", "qualityScore": 41}))
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 200
    payload = response.json()
    assert payload["code"] == 200
    assert payload["success"] is True
    assert payload["data"]["sleepVerdict"] == "Sleep more."
    # 5 + 2 (hr) + 1 (5 hours) + 0.5 (caffeine) = 8.5 -> 9
    assert payload["data"]["stressLevelDetected"] == 9
    assert payload["data"]["stressInsight"].startswith("Calculated from your resting heart rate (88 bpm)")
    assert payload["meta"]["sleep_hours"] == 5.0
    assert payload["meta"]["fallback"] is False


@pytest.mark.anyio
async def test_analyze_reports_fallback_in_meta(stub_provider_factory) -> None:
    provider = stub_provider_factory(text="not json at all")
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json={})

    assert response.status_code == 200
    payload = response.json()
    assert payload["meta"]["fallback"] is True
    assert payload["data"]["confidence"] == "low"
    assert payload["data"]["stressLevelDetected"] == 5


@pytest.mark.anyio
async def test_analyze_maps_provider_error_to_bad_gateway(stub_provider_factory) -> None:
    provider = stub_provider_factory(error=ProviderError("OpenAI API error: timeout", provider="openai"))
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 502
    payload = response.json()
    assert payload["success"] is False
    assert payload["data"]["error"] == "provider_error"
    assert payload["data"]["context"] == {"provider": "openai"}


@pytest.mark.anyio
async def test_analyze_maps_rate_limit_to_service_unavailable(stub_provider_factory) -> None:
    provider = stub_provider_factory(error=RateLimitError("slow down", retry_after=60, provider="openai"))
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 503
    assert response.json()["data"]["context"]["retry_after"] == 60


@pytest.mark.anyio
async def test_analyze_unexpected_error_returns_details(stub_provider_factory) -> None:
    provider = stub_provider_factory(error=RuntimeError("kaboom"))
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == "Analysis failed"
    assert payload["data"] == {"details": "kaboom"}


@pytest.mark.anyio
async def test_missing_configuration_returns_envelope() -> None:
    def _unconfigured():
        raise ConfigurationError("Required environment variable OPENAI_API_KEY not set", key="OPENAI_API_KEY")

    app.dependency_overrides[get_analysis_provider] = _unconfigured

    async with _client() as client:
        response = await client.post("/api/v1/sleep/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 500
    payload = response.json()
    assert payload["success"] is False
    assert payload["data"]["error"] == "configuration_error"
    assert payload["data"]["context"] == {"key": "OPENAI_API_KEY"}


@pytest.mark.anyio
async def test_legacy_analyze_returns_bare_result(stub_provider_factory) -> None:
    provider = stub_provider_factory(
        text='```json\n{"stressLevelDetected": "6", "stressInsight": "Moderate."}\n```'
    )
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"stressLevelDetected": 6, "stressInsight": "Moderate."}


@pytest.mark.anyio
async def test_legacy_analyze_failure_shape(stub_provider_factory) -> None:
    provider = stub_provider_factory(error=ProviderError("OpenAI API error: down", provider="openai"))
    app.dependency_overrides[get_analysis_provider] = lambda: provider

    async with _client() as client:
        response = await client.post("/api/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed", "details": "OpenAI API error: down"}


@pytest.mark.anyio
async def test_duration_endpoint() -> None:
    async with _client() as client:
        response = await client.post(
            "/api/v1/sleep/duration", json={"bedTime": "23:00", "wakeTime": "06:20"}
        )

    assert response.status_code == 200
    assert response.json()["data"] == {"sleepHours": 7.5}


@pytest.mark.anyio
async def test_stress_endpoint_applies_defaults() -> None:
    async with _client() as client:
        response = await client.post(
            "/api/v1/sleep/stress", json={"heartRate": 50, "sleepHours": 9, "caffeineAfternoon": "no"}
        )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["level"] == 4
    assert "relaxed range" in data["insight"]


@pytest.mark.anyio
async def test_health_check() -> None:
    async with _client() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.anyio
async def test_legacy_analyze_missing_api_key_keeps_legacy_shape(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delitem(ai.ai_clients, "openai_async", raising=False)

    async with _client() as client:
        response = await client.post("/api/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Analysis failed",
        "details": "Required environment variable OPENAI_API_KEY not set",
    }


@pytest.mark.anyio
async def test_legacy_analyze_dependency_failure_keeps_legacy_shape() -> None:
    def _unconfigured():
        raise ConfigurationError("Unknown text model: llama-3", key="SLEEP_ANALYSIS_MODEL")

    app.dependency_overrides[get_analysis_provider] = _unconfigured

    async with _client() as client:
        response = await client.post("/api/analyze", json=FORM_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed", "details": "Unknown text model: llama-3"}
