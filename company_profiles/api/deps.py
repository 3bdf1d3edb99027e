"""
API dependencies for dependency injection.
"""
from functools import lru_cache

from company_profiles.core.config import settings
from company_profiles.repositories.listing_repository import ListingRepository
from company_profiles.services.company_service import CompanyDirectoryService


@lru_cache()
def get_directory_service() -> CompanyDirectoryService:
    """
    The company directory service used by every route.

    Override this dependency to swap the listing store or settings.
    """
    return CompanyDirectoryService(store=ListingRepository(), settings=settings)
