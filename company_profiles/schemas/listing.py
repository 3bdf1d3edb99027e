"""
Job listing schemas.
"""
from typing import Optional

from company_profiles.schemas.base import BaseSchema, TimestampSchema, IDSchema


class JobListingResponse(IDSchema, TimestampSchema):
    """A job listing as shown on a company page."""

    title: str
    status: str
    filled: bool
    company_name: str
    company_slug: Optional[str] = None
    company_location: Optional[str] = None
    company_industry: Optional[str] = None
    company_size: Optional[str] = None
    company_description: Optional[str] = None
    company_tagline: Optional[str] = None
    logo_url: Optional[str] = None


class ListingFilter(BaseSchema):
    """
    Query parameters understood by a ListingStore.

    Unset fields do not filter. Results always come back newest first.
    """

    identifier: Optional[str] = None  # company_name OR company_slug, exact
    company_name: Optional[str] = None  # exact
    published_only: bool = False
    hide_filled: bool = False
    name_contains: Optional[str] = None  # case-insensitive substring
    location_contains: Optional[str] = None
    industry_contains: Optional[str] = None
    limit: Optional[int] = None
