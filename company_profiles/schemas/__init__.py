"""
Pydantic schemas for API validation and serialization.
"""
from company_profiles.schemas.base import (
    BaseSchema,
    ErrorResponse,
)
from company_profiles.schemas.listing import (
    JobListingResponse,
    ListingFilter,
)
from company_profiles.schemas.company import (
    CompanyProfile,
    CompanyAggregate,
    CompanySummary,
    CompanyListResponse,
    IndustryListResponse,
    PositionCountResponse,
    CompanyPageResponse,
    SlugBackfillResult,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    # Listing
    "JobListingResponse",
    "ListingFilter",
    # Company
    "CompanyProfile",
    "CompanyAggregate",
    "CompanySummary",
    "CompanyListResponse",
    "IndustryListResponse",
    "PositionCountResponse",
    "CompanyPageResponse",
    "SlugBackfillResult",
]
