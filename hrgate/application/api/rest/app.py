import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hrgate.application.api.middleware import AccessGateMiddleware
from hrgate.application.api.path_matcher import PathMatcher
from hrgate.application.api.v1.routes import health
from hrgate.application.di import create_container
from hrgate.config import Config, configure_logging
from hrgate.domain.access.service.access_gate import AccessGate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.dishka_container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    # Build and validate the access tables now (fail fast, never per request)
    container = create_container(config)
    container.get(AccessGate)
    container.get(PathMatcher)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.configure(
        service_name=config.server.name,
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )
    logfire.instrument_fastapi(app_instance)

    app_instance.state.dishka_container = container
    app_instance.add_middleware(AccessGateMiddleware)

    app_instance.include_router(health.router, prefix="/api/v1")

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
