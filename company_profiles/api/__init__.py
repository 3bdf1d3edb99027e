"""
API package.
"""
from company_profiles.api.routes import api_router, build_profile_router
from company_profiles.api.deps import get_directory_service

__all__ = [
    "api_router",
    "build_profile_router",
    "get_directory_service",
]
