"""
FastAPI application entry point.

This is the main application that ties together all components:
- API routes for withdrawals and health checks
- CORS configuration for browser clients
- Request logging middleware
- Error handling and logging
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from atm_withdrawal import __version__
from atm_withdrawal.api.routes import health, withdrawal
from atm_withdrawal.api.schemas import ErrorResponse
from atm_withdrawal.config import get_settings
from atm_withdrawal.services.withdrawal import get_withdrawal_service

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The catch-all handler turns this into a 500 further out
            self._log(request, status.HTTP_500_INTERNAL_SERVER_ERROR, start_time)
            raise
        self._log(request, response.status_code, start_time)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} -> {status_code} ({duration_ms:.1f}ms)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the withdrawal service once so configuration problems surface
    at startup rather than on the first request.
    """
    settings = get_settings()

    logger.info(f"Starting ATM Withdrawal API v{__version__}")
    logger.info(f"Debug mode: {settings.debug}")

    service = get_withdrawal_service()
    logger.info(
        f"Denominations: {service.calculator.denominations} "
        f"({settings.currency_code}, {service.strategy} selection)"
    )

    yield  # Application runs here

    logger.info("Shutting down ATM Withdrawal API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()

    app = FastAPI(
        title="ATM Withdrawal API",
        description="API for simulating ATM cash note delivery with minimum note optimization",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(withdrawal.router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies in the standard error shape."""
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.warning(f"Invalid request to {request.url.path}: {message}")

        error = ErrorResponse(
            message=message,
            error_type="ValidationError",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        return JSONResponse(
            status_code=error.status_code,
            content=error.model_dump(mode="json", by_alias=True),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")

        # Internal details stay in the log
        error = ErrorResponse(
            message=INTERNAL_ERROR_MESSAGE,
            error_type="InternalServerError",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        return JSONResponse(
            status_code=error.status_code,
            content=error.model_dump(mode="json", by_alias=True),
        )

    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "atm_withdrawal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
