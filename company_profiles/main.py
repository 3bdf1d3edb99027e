"""
Company Profiles API - FastAPI Application Entry Point.

Company pages and a company directory built on top of a job board's listings.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from company_profiles.core.config import settings
from company_profiles.core.database import async_session_maker, close_db, init_db
from company_profiles.core.exceptions import APIException
from company_profiles.core.logging import RequestIDMiddleware, get_logger, setup_logging
from company_profiles.api.deps import get_directory_service
from company_profiles.api.routes import api_router, build_profile_router

logger = get_logger(__name__)


async def backfill_company_slugs() -> None:
    """Generate missing company slugs in one transaction."""
    service = get_directory_service()
    async with async_session_maker() as db:
        result = await service.ensure_company_slugs(db)
        await db.commit()
    logger.info("startup_slug_backfill_done", updated=result.updated)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler: startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    await init_db()
    logger.info("database_initialized")

    if settings.backfill_slugs_on_startup:
        await backfill_company_slugs()

    yield

    logger.info("shutting_down")
    await close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Company profile pages and directory for a job board",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

# Read-only public API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)


# Exception handlers
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions, log full detail, return sanitized message."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": str(exc),
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
        },
    )


# JSON API
app.include_router(api_router, prefix=settings.api_prefix)

# Public company pages
app.include_router(build_profile_router(settings.company_route_segment))


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "company_profiles.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
