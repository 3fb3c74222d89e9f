"""FastAPI application entry point."""
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes import admin, health, listings
from src.api.schemas.listing_responses import ApiResponse, ErrorInfo
from src.application.errors import InvalidQueryError, ListingNotFoundError
from src.config import settings
from src.infrastructure.logging_config import configure_logging
from src.infrastructure.storage.listing_repository import JsonListingRepository

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("listings_api_starting", environment=settings.environment)
    if getattr(app.state, "listing_repo", None) is None:
        # ListingsLoadError propagates: the app must not start without data
        app.state.listing_repo = JsonListingRepository(settings.listings_data_path)
    yield
    logger.info("listings_api_stopping")


def _error_response(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    body = ApiResponse(
        success=False,
        error=ErrorInfo(code=status_code, message=message, details=details),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _listing_not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, "Listing not found", str(exc))


async def _invalid_query_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def _log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
        client=request.client.host if request.client else None,
    )
    return response


def create_app() -> FastAPI:
    configure_logging(settings.log_level, json_output=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="Browse, search and summarise housing listings.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(_log_requests)

    app.add_exception_handler(ListingNotFoundError, _listing_not_found_handler)
    app.add_exception_handler(InvalidQueryError, _invalid_query_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]

    app.include_router(health.router)
    app.include_router(listings.router, prefix=settings.api_base_path)
    app.include_router(admin.router, prefix=settings.api_base_path)

    return app


app = create_app()
