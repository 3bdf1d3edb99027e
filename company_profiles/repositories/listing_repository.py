"""
Listing repository - data access for JobListing, and the ListingStore
contract the company directory depends on.
"""
from typing import Any, List, Optional, Protocol
from uuid import UUID

from sqlalchemy import select, update, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from company_profiles.models.job_listing import JobListing, STATUS_PUBLISH
from company_profiles.repositories.base import BaseRepository
from company_profiles.schemas.listing import ListingFilter

# Columns the directory is allowed to write back
UPDATABLE_FIELDS = frozenset({"company_slug"})


class ListingStore(Protocol):
    """What the company directory needs from listing storage."""

    async def get_by_id(
        self,
        db: AsyncSession,
        id: UUID,
    ) -> Optional[JobListing]:
        ...

    async def query_listings(
        self,
        db: AsyncSession,
        listing_filter: ListingFilter,
    ) -> List[JobListing]:
        ...

    async def update_listing_field(
        self,
        db: AsyncSession,
        listing_id: UUID,
        field: str,
        value: Any,
        *,
        only_if_empty: bool = False,
    ) -> bool:
        ...


class ListingRepository(BaseRepository[JobListing]):
    def __init__(self):
        super().__init__(JobListing)

    async def query_listings(
        self,
        db: AsyncSession,
        listing_filter: ListingFilter,
    ) -> List[JobListing]:
        """
        Find listings matching a filter, newest first.

        Substring filters match case-insensitively and treat % and _ in
        the search term literally.
        """
        query = select(JobListing)

        filters = []

        if listing_filter.identifier is not None:
            filters.append(
                or_(
                    JobListing.company_name == listing_filter.identifier,
                    JobListing.company_slug == listing_filter.identifier,
                )
            )

        if listing_filter.company_name is not None:
            filters.append(JobListing.company_name == listing_filter.company_name)

        if listing_filter.published_only:
            filters.append(JobListing.status == STATUS_PUBLISH)

        if listing_filter.hide_filled:
            filters.append(JobListing.filled == False)

        if listing_filter.name_contains:
            filters.append(
                JobListing.company_name.icontains(listing_filter.name_contains, autoescape=True)
            )

        if listing_filter.location_contains:
            filters.append(
                JobListing.company_location.icontains(listing_filter.location_contains, autoescape=True)
            )

        if listing_filter.industry_contains:
            filters.append(
                JobListing.company_industry.icontains(listing_filter.industry_contains, autoescape=True)
            )

        if filters:
            query = query.where(and_(*filters))

        query = query.order_by(JobListing.created_at.desc(), JobListing.id)

        if listing_filter.limit is not None:
            query = query.limit(listing_filter.limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def update_listing_field(
        self,
        db: AsyncSession,
        listing_id: UUID,
        field: str,
        value: Any,
        *,
        only_if_empty: bool = False,
    ) -> bool:
        """
        Set one field on one listing.

        With only_if_empty the write is conditional on the current value
        being NULL or "", so concurrent writers cannot overwrite each other.

        Returns:
            True if a row was changed.
        """
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be updated through the listing store")

        column = getattr(JobListing, field)
        stmt = update(JobListing).where(JobListing.id == listing_id)
        if only_if_empty:
            stmt = stmt.where(or_(column.is_(None), column == ""))

        result = await db.execute(
            stmt.values({field: value}).execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0
