from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from eventfinder.api.router import router as api_router
from eventfinder.core.config import Settings, settings as default_settings
from eventfinder.core.logging import configure_logging
from eventfinder.middleware.request_logging import RequestLoggingMiddleware
from eventfinder.store import EventStore, create_store

logger = structlog.get_logger()

API_VERSION = "1.0.0"


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


def create_app(store: EventStore | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(title="Mini Event Finder API", version=API_VERSION)
    app.state.event_store = store or create_store(settings.event_store_backend)

    # Starlette runs the LAST added middleware FIRST (outermost), so request
    # logging also sees CORS preflight responses.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(Exception, _unhandled_error)

    if settings.metrics_enabled:
        Instrumentator().instrument(app).expose(
            app, endpoint="/metrics", include_in_schema=False
        )

    @app.get("/")
    def root():
        return {
            "success": True,
            "message": "Welcome to Mini Event Finder API",
            "version": API_VERSION,
            "endpoints": {
                "health": "/api/health",
                "events": "/api/events",
            },
        }

    app.include_router(api_router, prefix="/api")

    logger.info(
        "app_started",
        env=settings.env,
        port=settings.port,
        cors_allow_origins=settings.cors_allow_origins,
        store_backend=type(app.state.event_store).__name__,
    )
    return app


app = create_app()
