"""
Database models for Company Profiles.

All models use UUID primary keys and include created_at/updated_at timestamps.
"""
from company_profiles.models.base import BaseModel, TimestampMixin, UUIDMixin
from company_profiles.models.job_listing import JobListing, STATUS_PUBLISH

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "UUIDMixin",
    "JobListing",
    "STATUS_PUBLISH",
]
