"""
Company schemas.

Companies are never stored; every schema here is derived from listings.
"""
from typing import List, Optional

from company_profiles.schemas.base import BaseSchema
from company_profiles.schemas.listing import JobListingResponse


class CompanyProfile(BaseSchema):
    """Company details taken from its most recent listing."""

    name: str
    slug: Optional[str] = None
    logo_url: Optional[str] = None
    info: Optional[str] = None  # description, falling back to tagline
    location: Optional[str] = None
    size: Optional[str] = None


class CompanyAggregate(BaseSchema):
    """Every listing for one company, any status."""

    count: int
    listings: List[JobListingResponse] = []


class CompanySummary(CompanyProfile):
    """Profile plus position count and listings, for the company directory."""

    url: str
    position_count: int
    listings: List[JobListingResponse] = []


class CompanyListResponse(BaseSchema):
    """Company names matching a directory search."""

    items: List[str]
    total: int


class IndustryListResponse(BaseSchema):
    """Distinct industries across published listings."""

    items: List[str]
    total: int


class PositionCountResponse(BaseSchema):
    """Number of listings posted by a company."""

    company: str
    count: int


class CompanyPageResponse(BaseSchema):
    """Payload for the public /company/{identifier}/ page."""

    identifier: str
    title: str
    listings: List[JobListingResponse]


class SlugBackfillResult(BaseSchema):
    """Outcome of a company slug backfill run."""

    success: bool
    scanned: int
    updated: int
    skipped: int = 0
