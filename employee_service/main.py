"""Maliev Employee Service: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Middleware order, outermost first: correlation id → CORS → exception
      handling → HTTPS redirect → routing
    - Unhandled exceptions are owned by ExceptionHandlingMiddleware; anticipated
      errors by the global handlers in api/error_handlers.py
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory: tests build apps with explicit settings
      instead of mutating the environment
    - Swagger UI at /swagger, document at /swagger/v1/swagger.json
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from employee_service.api.correlation import CorrelationIdMiddleware
from employee_service.api.error_handlers import register_error_handlers
from employee_service.api.middleware import ExceptionHandlingMiddleware
from employee_service.api.routes import employees, health
from employee_service.api.versioning import DEFAULT_API_VERSION
from employee_service.config import Settings, get_settings
from employee_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

SERVICE_TITLE = "Maliev Employee Service"


def configure_logging(settings: Settings) -> None:
    setup_logging(
        settings.log_level,
        settings.log_format,
        environment=settings.environment,
        log_file=settings.log_file,
        excluded_paths=settings.log_excluded_paths,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    configure_logging(settings)
    logger.info(
        f"{SERVICE_TITLE} started",
        extra={"api_version": DEFAULT_API_VERSION},
    )
    yield
    logger.info(f"{SERVICE_TITLE} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its routes, handlers and middleware."""
    settings = settings or get_settings()
    app = FastAPI(
        title=SERVICE_TITLE,
        version=DEFAULT_API_VERSION,
        lifespan=lifespan,
        docs_url="/swagger",
        redoc_url=None,
        openapi_url=f"/swagger/v{DEFAULT_API_VERSION.split('.')[0]}/swagger.json",
    )
    app.state.settings = settings
    app.state.readiness_checks = {}

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(employees.router)

    # add_middleware wraps: last added runs first
    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(
        ExceptionHandlingMiddleware, is_development=settings.is_development,
    )
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(CorrelationIdMiddleware)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    try:
        logger.info(f"Starting {SERVICE_TITLE}")
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except SystemExit as exc:
        # uvicorn exits this way when it cannot start (e.g. port in use)
        if exc.code not in (None, 0):
            logger.critical("Application terminated unexpectedly", exc_info=True)
        raise
    except Exception:
        logger.critical("Application terminated unexpectedly", exc_info=True)
    finally:
        logging.shutdown()


if __name__ == "__main__":
    run()
