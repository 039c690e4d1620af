"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vacation_manager import __version__
from vacation_manager.config import get_settings
from vacation_manager.database import close_db, init_db
from vacation_manager.exceptions import AppError

logger = logging.getLogger(__name__)


def describe_validation_errors(errors) -> str:
    """Flatten request validation errors into one readable message."""
    parts = []
    for error in errors:
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Initializes database on startup and closes connections on shutdown.
    """
    settings = get_settings()
    logger.info("Starting %s v%s (debug=%s)", settings.app_name, __version__, settings.debug)

    await init_db()

    yield

    await close_db()
    logger.info("%s shutdown complete", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Employee vacation requests, approvals and team calendars",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from vacation_manager.routers import health, teams, users, vacations

    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix=settings.api_prefix, tags=["Users"])
    app.include_router(teams.router, prefix=settings.api_prefix, tags=["Teams"])
    app.include_router(vacations.router, prefix=settings.api_prefix, tags=["Vacations"])

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Render application errors as {"error": ..., "code": ...}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "code": exc.code},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Render malformed requests in the same shape, keeping status 422."""
        return JSONResponse(
            status_code=422,
            content={"error": describe_validation_errors(exc.errors()), "code": "INVALID_REQUEST"},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vacation_manager.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
