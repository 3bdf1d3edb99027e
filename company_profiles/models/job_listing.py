"""
JobListing model - a job posting carrying its company's metadata.

There is no separate companies table: a company is the set of listings
sharing a company name (or the slug generated from it).
"""
from typing import Optional
from sqlalchemy import String, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from company_profiles.models.base import BaseModel

STATUS_PUBLISH = "publish"


class JobListing(BaseModel):
    """
    Job listing entity.

    company_slug starts empty for listings created by job posters and is
    filled in once by the slug backfill; after that it never changes.
    """

    __tablename__ = "job_listings"

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=STATUS_PUBLISH,
        index=True,
    )  # 'publish', 'draft', 'pending', 'expired'
    filled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Company metadata
    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company_slug: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    company_location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    company_industry: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    company_size: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    company_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    company_tagline: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<JobListing {self.title} at {self.company_name}>"
