"""Core module exports."""
from company_profiles.core.config import settings, get_settings, Settings
from company_profiles.core.database import (
    Base,
    get_db,
    init_db,
    close_db,
    engine,
    async_session_maker,
)
from company_profiles.core.exceptions import (
    APIException,
    NotFoundException,
    CompanyNotFoundException,
)
from company_profiles.core.slugs import slugify, company_profile_url

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Exceptions
    "APIException",
    "NotFoundException",
    "CompanyNotFoundException",
    # Slugs
    "slugify",
    "company_profile_url",
]
