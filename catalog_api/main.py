# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Any, Dict, List
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, product_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .domain.exceptions import ValidationError, ServerError
from .infrastructure.db.mongo_connection import ensure_indexes, ping_database, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates MongoDB indexes on startup and closes the client on shutdown.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is not reachable yet
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


def _validation_errors(exception: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors to [{field, message}] (location prefix dropped)"""
    errors = []
    for error in exception.errors():
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in ("body", "query", "path", "header"):
            location = location[1:]
        errors.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return errors


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    message = exception.detail
    if exception.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Route not found"
    return JSONResponse(
        status_code=exception.status_code,
        content={"message": message},
        headers=getattr(exception, "headers", None),
    )


async def validation_exception_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    error = ValidationError(errors=_validation_errors(exception))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": error.message, "errors": error.errors}),
    )


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    # Exception text is only exposed when running in development
    error = ServerError(str(exception) if get_settings().is_development else None)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Something went wrong!", "error": error.message},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - JSON error handlers ({"message": ...} on every error)
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="Product Catalog API",
        version="1.0.0",
        description="Authentication and product management backed by MongoDB",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(product_router, prefix="/api/v1/products")

    @application.get("/", tags=["health"])
    async def root() -> Dict[str, str]:
        """Report that the API is up and whether MongoDB answers"""
        connected = await ping_database()
        return {
            "message": "API is running",
            "database": "Connected" if connected else "Disconnected",
        }

    return application


# Create application instance
app = create_application()
