from __future__ import annotations

"""Sleep Analysis Backend - Main Application Entry Point
This is the FastAPI application factory for the sleep analysis service.
Architecture Overview:
    - Feature-based modular architecture (see features/ directory)
    - Provider registry pattern for resolving the analysis language model
    - Local stress heuristic guarantees stress fields on every assessment
Entry Points:
    - /health - Health check endpoint
    - /api/v1/sleep/* - RESTful sleep endpoints (enveloped responses)
    - /api/analyze - Legacy endpoint used by the React web client
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.exceptions import ConfigurationError
from core.http.errors import format_configuration_error
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error as api_error
from core.utils.env import is_production
from features.sleep.routes import legacy_router as sleep_legacy_router
from features.sleep.routes import router as sleep_router

setup_logging()

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


def create_app() -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    settings = get_settings()
    app = FastAPI(
        debug=settings.debug_mode,
        title="Sleep Analysis Backend",
        description="Sleep quality assessment from self-reported metrics",
        version=APP_VERSION,
    )

    # Configure CORS based on environment
    if is_production():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            ],
            # Allow any localhost port in dev (Vite picks the next free one)
            allow_origin_regex=r"^http://(localhost|127\.0\.0\.1)(:\d+)?$",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        """Return a structured API envelope for configuration errors."""

        logger.error("Configuration error on %s: %s", request.url.path, exc)
        payload = api_error(
            code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=str(exc),
            data=format_configuration_error(exc),
        )
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": APP_VERSION}

    register_http_request_logging(app)

    app.include_router(sleep_router)
    app.include_router(sleep_legacy_router)

    logger.info("Application created with sleep routers (environment=%s)", settings.environment)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
