"""HTTP routing for the sleep feature."""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from core.exceptions import ProviderError, RateLimitError, ServiceError
from core.http.errors import format_provider_error
from core.pydantic_schemas import error as api_error, ok as api_ok

from .dependencies import get_sleep_analysis_service
from .duration import compute_sleep_hours
from .schemas import (
    SleepDurationRequest,
    SleepDurationResponse,
    SleepMetricsInput,
    StressEstimateRequest,
    StressEstimateResponse,
)
from .service import SleepAnalysisService
from .stress import estimate_stress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/sleep", tags=["Sleep"])


def _legacy_failure(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Analysis failed", "details": str(exc)},
    )


class LegacyAnalysisRoute(APIRoute):
    """Route answering service failures in the legacy ``{"error", "details"}`` shape.

    Errors raised while resolving dependencies (a missing API key, an unknown
    model) surface inside the route handler, so they are covered as well.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def legacy_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except ServiceError as exc:
                logger.error("Legacy sleep analysis failed on %s: %s", request.url.path, exc)
                return _legacy_failure(exc)

        return legacy_handler


# Path and body shape used by the React web client
legacy_router = APIRouter(tags=["Legacy Compatibility"], route_class=LegacyAnalysisRoute)


def _provider_error_response(exc: ProviderError) -> JSONResponse:
    code = (
        status.HTTP_503_SERVICE_UNAVAILABLE
        if isinstance(exc, RateLimitError)
        else status.HTTP_502_BAD_GATEWAY
    )
    return JSONResponse(
        status_code=code,
        content=api_error(code, "Sleep analysis provider failed", data=format_provider_error(exc)),
    )


@router.post("/analyze", summary="Assess sleep quality from self-reported metrics")
async def analyze_sleep_endpoint(
    metrics: SleepMetricsInput,
    service: SleepAnalysisService = Depends(get_sleep_analysis_service),
):
    """Return the model assessment with locally guaranteed stress fields."""

    try:
        analysis = await service.analyze(metrics)
    except ProviderError as exc:
        logger.error("Sleep analysis provider failure: %s", exc)
        return _provider_error_response(exc)
    except Exception as exc:
        logger.exception("Sleep analysis failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=api_error(500, "Analysis failed", data={"details": str(exc)}),
        )

    return api_ok(
        "Sleep analysis generated",
        data=analysis.result,
        meta={
            "model": analysis.model,
            "sleep_hours": analysis.sleep_hours,
            "fallback": analysis.used_fallback,
        },
    )


@router.post("/duration", summary="Compute hours slept from bed and wake time")
async def sleep_duration_endpoint(body: SleepDurationRequest) -> dict:
    hours = compute_sleep_hours(body.bed_time, body.wake_time)
    payload = SleepDurationResponse(sleep_hours=hours).model_dump(by_alias=True)
    return api_ok("Sleep duration computed", data=payload)


@router.post("/stress", summary="Estimate stress locally from heart rate, sleep and caffeine")
async def stress_estimate_endpoint(body: StressEstimateRequest) -> dict:
    estimate = estimate_stress(body.heart_rate, body.sleep_hours, body.caffeine_afternoon)
    payload = StressEstimateResponse(level=estimate.level, insight=estimate.insight).model_dump()
    return api_ok("Stress estimated", data=payload)


@legacy_router.post("/api/analyze")
async def legacy_analyze_endpoint(
    metrics: SleepMetricsInput,
    service: SleepAnalysisService = Depends(get_sleep_analysis_service),
):
    """Return the bare assessment, or ``{"error", "details"}`` with status 500."""

    try:
        analysis = await service.analyze(metrics)
    except Exception as exc:
        logger.exception("Legacy sleep analysis failed")
        return _legacy_failure(exc)
    return analysis.result


__all__ = ["legacy_router", "router"]
