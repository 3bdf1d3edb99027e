"""
Company directory service - company pages built from job listings.

There is no companies table. A "company" is every listing that shares a
company name, and its public URL uses the slug generated from that name.
This service owns the rules for turning a route parameter or a search
into listings and company summaries:
- Route lookups match name OR slug and only show published listings.
- Counts and profiles look at every listing, whatever its status.
- Slugs are generated once and never rewritten.

Routes stay thin; everything that decides WHICH listings belong to a
company lives here.
"""
from typing import List, Optional, Set

from sqlalchemy.ext.asyncio import AsyncSession

from company_profiles.core.config import Settings, settings as default_settings
from company_profiles.core.exceptions import CompanyNotFoundException
from company_profiles.core.logging import get_logger
from company_profiles.core.slugs import company_profile_url, slugify
from company_profiles.repositories.listing_repository import ListingRepository, ListingStore
from company_profiles.schemas.company import (
    CompanyAggregate,
    CompanyProfile,
    CompanySummary,
    SlugBackfillResult,
)
from company_profiles.schemas.listing import JobListingResponse, ListingFilter

logger = get_logger(__name__)


class CompanyDirectoryService:
    """Resolves company pages, directory searches and company summaries."""

    def __init__(
        self,
        store: Optional[ListingStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.store = store if store is not None else ListingRepository()
        self.settings = settings if settings is not None else default_settings

    async def resolve_company_listings(
        self,
        db: AsyncSession,
        identifier: str,
        hide_filled: Optional[bool] = None,
    ) -> List[JobListingResponse]:
        """
        Published listings whose company name or slug equals identifier.

        An empty list is a valid answer; the route turns it into a 404.
        """
        if hide_filled is None:
            hide_filled = self.settings.hide_filled_positions

        listings = await self.store.query_listings(
            db,
            ListingFilter(
                identifier=identifier,
                published_only=True,
                hide_filled=hide_filled,
            ),
        )
        return [JobListingResponse.model_validate(listing) for listing in listings]

    async def search_companies(
        self,
        db: AsyncSession,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> Set[str]:
        """
        Unique names of companies with published listings matching every
        given filter. Empty strings do not filter.
        """
        listings = await self.store.query_listings(
            db,
            ListingFilter(
                published_only=True,
                name_contains=keyword or None,
                location_contains=location or None,
                industry_contains=industry or None,
            ),
        )
        return {listing.company_name for listing in listings}

    async def list_industries(
        self,
        db: AsyncSession,
        include_empty: Optional[bool] = None,
    ) -> Set[str]:
        """
        Distinct industries across published listings.

        Listings without an industry collapse into a single "" entry,
        kept unless include_empty is off.
        """
        if include_empty is None:
            include_empty = self.settings.include_empty_industries

        listings = await self.store.query_listings(db, ListingFilter(published_only=True))
        industries = {listing.company_industry or "" for listing in listings}

        if not include_empty:
            industries.discard("")
        return industries

    async def aggregate_company(
        self,
        db: AsyncSession,
        company_name: str,
    ) -> CompanyAggregate:
        """All listings for a company, any status, newest first."""
        listings = await self.store.query_listings(
            db,
            ListingFilter(company_name=company_name),
        )
        return CompanyAggregate(
            count=len(listings),
            listings=[JobListingResponse.model_validate(listing) for listing in listings],
        )

    async def position_count(
        self,
        db: AsyncSession,
        company_name: str,
    ) -> int:
        aggregate = await self.aggregate_company(db, company_name)
        return aggregate.count

    async def latest_company_profile(
        self,
        db: AsyncSession,
        company_name: str,
    ) -> CompanyProfile:
        """
        Company details from its most recent listing.

        Raises:
            CompanyNotFoundException: If the company has no listings.
        """
        listings = await self.store.query_listings(
            db,
            ListingFilter(company_name=company_name, limit=1),
        )
        if not listings:
            raise CompanyNotFoundException(company_name)

        latest = listings[0]
        return CompanyProfile(
            name=latest.company_name,
            slug=latest.company_slug,
            logo_url=latest.logo_url,
            info=latest.company_description or latest.company_tagline,
            location=latest.company_location,
            size=latest.company_size,
        )

    async def company_summary(
        self,
        db: AsyncSession,
        company_name: str,
    ) -> CompanySummary:
        """
        Profile, position count, listings and URL for one company.

        Raises:
            CompanyNotFoundException: If the company has no listings.
        """
        profile = await self.latest_company_profile(db, company_name)
        aggregate = await self.aggregate_company(db, company_name)

        return CompanySummary(
            **profile.model_dump(),
            url=self.company_url(profile.slug, profile.name),
            position_count=aggregate.count,
            listings=aggregate.listings,
        )

    async def ensure_company_slugs(
        self,
        db: AsyncSession,
    ) -> SlugBackfillResult:
        """
        Give every listing without a company slug the slug of its name.

        Safe to interrupt and re-run: each write only lands while the slug
        is still empty, so existing slugs are never touched. The caller
        owns the transaction.
        """
        listings = await self.store.query_listings(db, ListingFilter())

        updated = 0
        skipped = 0
        for listing in listings:
            if listing.company_slug:
                continue

            slug = slugify(listing.company_name)
            if not slug:
                skipped += 1
                logger.warning(
                    "company_slug_unavailable",
                    listing_id=str(listing.id),
                    company_name=listing.company_name,
                )
                continue

            changed = await self.store.update_listing_field(
                db,
                listing.id,
                "company_slug",
                slug,
                only_if_empty=True,
            )
            if changed:
                updated += 1
                continue

            # Another writer got there between the scan and the update
            current = await self.store.get_by_id(db, listing.id)
            logger.info(
                "company_slug_already_set",
                listing_id=str(listing.id),
                company_slug=current.company_slug if current else None,
            )

        logger.info(
            "company_slugs_backfilled",
            scanned=len(listings),
            updated=updated,
            skipped=skipped,
        )
        return SlugBackfillResult(
            success=True,
            scanned=len(listings),
            updated=updated,
            skipped=skipped,
        )

    def company_url(
        self,
        company_slug: Optional[str],
        company_name: str,
    ) -> str:
        """Public profile URL using the configured site and route segment."""
        return company_profile_url(
            company_slug,
            company_name,
            site_url=self.settings.site_url,
            route_segment=self.settings.company_route_segment,
            pretty_permalinks=self.settings.pretty_permalinks,
        )

    def page_title(self, identifier: str) -> str:
        """Document title for a company page, e.g. "Jobs at Acme - Job Board"."""
        sep = self.settings.title_separator
        return f"Jobs at {identifier} {sep} {self.settings.site_name}"
