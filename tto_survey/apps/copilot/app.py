"""FastAPI application wiring for the AI copilot proxy."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from tto_survey.apps.copilot.routers import copilot
from tto_survey.core.logging import configure_logging
from tto_survey.core.settings import get_settings

configure_logging()
request_logger = logging.getLogger("tto.copilot.requests")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Starting TTO copilot proxy (environment=%s, provider=%s, model=%s)",
        settings.environment,
        settings.ai_provider,
        settings.ai_model,
    )
    try:
        yield
    finally:
        logger.info("TTO copilot proxy shut down")


def create_app() -> FastAPI:
    settings = get_settings()
    docs_url = "/docs" if settings.copilot_docs_enabled else None
    openapi_url = "/openapi.json" if settings.copilot_docs_enabled else None

    app = FastAPI(
        title="TTO Survey AI Copilot",
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=openapi_url,
    )
    app.include_router(copilot.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            request_logger.exception(
                "HTTP %s %s failed",
                request.method,
                request.url.path,
                extra={"path": request.url.path, "method": request.method, "duration_ms": duration},
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        request_logger.info(
            "HTTP %s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response

    return app


app = create_app()

__all__ = ["app", "create_app", "lifespan"]
