"""
Application factory and configuration for the menu options engine.

This module provides the application factory pattern for creating the FastAPI app.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.exceptions import RequestValidationError
import time
import uvicorn
from typing import Optional
from dotenv import load_dotenv

from api.routes import cart_router, catalog_router, selection_router
from core.errors import (
    DataUnavailableError,
    GroupCapReachedError,
    NotFoundError,
    OptionUnavailableError,
)
from utils.logging import setup_logger
from config.config import config

# Load environment variables from .env file
load_dotenv()

logger = setup_logger(__name__)

PUBLIC_PATHS = ["/docs", "/redoc", "/openapi.json", "/ping"]


def _error_response(status_code: int, error: str, detail=None) -> JSONResponse:
    content = {"success": False, "error": error}
    if detail is not None:
        content["detail"] = detail
    return JSONResponse(status_code=status_code, content=content)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application.
    """
    app = FastAPI(
        title="Menu Options API",
        description="Option selection, validation and pricing for configurable menu products",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router, prefix="/api")
    app.include_router(selection_router, prefix="/api")
    app.include_router(cart_router, prefix="/api")

    @app.middleware("http")
    async def validate_api_key(request: Request, call_next):
        """Require X-API-Key on API routes when api.key is configured."""
        expected_api_key = config.get_api_config()["key"]
        path = request.url.path
        if not expected_api_key or path == "/" or any(path.startswith(p) for p in PUBLIC_PATHS):
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")
        logger.debug(f"Received API key: {'[PRESENT]' if api_key else '[MISSING]'}")

        if api_key != expected_api_key:
            logger.warning(f"Invalid API key used to access: {path}")
            return _error_response(401, "Invalid or missing API key")

        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request and add the processing time header."""
        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Request: {method} {path} from {client_host}")

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        logger.info(
            f"Response: {response.status_code} for {method} {path} - took {process_time:.4f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle validation errors and return a clean JSON response."""
        errors = []
        for error in exc.errors():
            error_loc = " -> ".join([str(loc) for loc in error["loc"] if loc != "body"])
            errors.append(f"{error_loc}: {error['msg']}")

        return _error_response(422, "Validation error", errors)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        """Stale or unknown ids end the configuration interaction."""
        logger.warning(f"Not found on {request.url.path}: {exc}")
        return _error_response(404, str(exc))

    @app.exception_handler(OptionUnavailableError)
    async def option_unavailable_handler(request: Request, exc: OptionUnavailableError):
        logger.info(f"Unavailable option requested: {exc}")
        return _error_response(409, str(exc))

    @app.exception_handler(GroupCapReachedError)
    async def group_cap_handler(request: Request, exc: GroupCapReachedError):
        return _error_response(409, str(exc))

    @app.exception_handler(DataUnavailableError)
    async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
        logger.error(f"Data unavailable for {request.url.path}: {exc}")
        return _error_response(503, "Data unavailable", str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return _error_response(400, "Bad request", str(exc))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all uncaught exceptions and return a clean JSON response."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error_response(500, "Internal server error", str(exc))

    @app.get("/ping", tags=["health"])
    async def health_check():
        """Health check endpoint to verify API is running."""
        return {"success": True, "message": "Menu Options API is running"}

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect root endpoint to docs."""
        return RedirectResponse(url="/docs")

    return app


def start_server(host: Optional[str] = None, port: Optional[int] = None):
    """
    Start the FastAPI server with uvicorn.

    Args:
        host: Host to bind to. If None, uses the value from config.
        port: Port to bind to. If None, uses the value from config.
    """
    app = create_app()
    api_config = config.get_api_config()

    host = host or api_config["host"]
    port = port or api_config["port"]

    logger.info(f"Starting Menu Options API server on {host}:{port}")
    uvicorn.run(
        app, host=host, port=port, log_level=config.get("logging.level", "info").lower()
    )


if __name__ == "__main__":
    start_server()
