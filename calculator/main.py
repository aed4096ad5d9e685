"""Calculator API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Logging configured in create_app, before the first request, on a logger owned
      by that app; the resulting service logger is the one injected into every handler
    - Global error handlers map CalculatorError -> plain-text 400 responses

Design Decisions:
    - Application factory: tests build an app per settings object (isolated log files)
      while `app` stays importable for `uvicorn calculator.main:app`
    - Lifespan over @app.on_event: startup banner and handler cleanup
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from calculator.api.error_handlers import register_error_handlers
from calculator.api.middleware import RequestLoggingMiddleware
from calculator.api.routes import arithmetic, health
from calculator.config import Settings, get_settings
from calculator.infrastructure.observability import setup_logging, shutdown_logging

__version__ = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger = app.state.service_logger
    logger.info(f"Server is running on http://localhost:{app.state.settings.port}")
    yield
    logger.info("Calculator service shutting down")
    shutdown_logging(logger)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Calculator Microservice", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_logger = setup_logging(settings, name=f"calculator.app.{id(app)}")

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(arithmetic.router)
    return app


app = create_app()
