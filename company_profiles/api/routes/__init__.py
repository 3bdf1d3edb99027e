"""
API Routes package.
"""
from fastapi import APIRouter

from company_profiles.api.routes.health import router as health_router
from company_profiles.api.routes.companies import router as companies_router
from company_profiles.api.routes.profiles import build_profile_router

# JSON API router, mounted under settings.api_prefix
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(companies_router)

__all__ = [
    "api_router",
    "health_router",
    "companies_router",
    "build_profile_router",
]
