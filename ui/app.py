"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import BaseSimError, BoundaryViolation, InputError
from core.health import HealthChecker, check_event_loop, create_engine_check
from internal.logging import StructuredLogger, get_logger, parse_level
from ui.routes import grid, health


def error_status(exc):
    """HTTP status for a simulation error."""
    if isinstance(exc, InputError):
        return 422
    if isinstance(exc, BoundaryViolation):
        return 409
    return 500


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("engine", create_engine_check(), critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=app.version)
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="Langton's Ant",
        version="1.0.0",
        description="bounded-grid Langton's Ant simulator",
        lifespan=lifespan,
    )

    @app.exception_handler(BaseSimError)
    async def sim_error_handler(request: Request, exc: BaseSimError):
        status_code = error_status(exc)
        log = logger_instance.error if status_code >= 500 else logger_instance.warn
        log("request failed", error=exc, error_id=exc.error_id, path=request.url.path,
            status=status_code)
        return JSONResponse(content=exc.to_dict(), status_code=status_code)

    grid.init(config.simulation)
    health.init(health_checker)

    app.include_router(grid.router)
    app.include_router(health.router)

    return app
