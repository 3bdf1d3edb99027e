"""
Public company page routes.

The route segment is configurable, so the router is built from settings
instead of declared at import time. Two URL shapes are served:
- /{segment}/{identifier}/        (pretty permalinks)
- /index.php?{segment}={identifier}  (plain permalinks)
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from company_profiles.api.deps import get_directory_service
from company_profiles.core.database import get_db
from company_profiles.core.exceptions import CompanyNotFoundException
from company_profiles.core.logging import get_logger
from company_profiles.schemas.base import ErrorResponse
from company_profiles.schemas.company import CompanyPageResponse
from company_profiles.services.company_service import CompanyDirectoryService

logger = get_logger(__name__)


async def render_company_page(
    identifier: str,
    service: CompanyDirectoryService,
    db: AsyncSession,
) -> CompanyPageResponse:
    """
    Resolve a company page, raising 404 when nothing is listed.

    Raises:
        CompanyNotFoundException: If no published listing matches.
    """
    if not identifier:
        raise CompanyNotFoundException()

    listings = await service.resolve_company_listings(db, identifier)
    if not listings:
        logger.info("company_route_empty", identifier=identifier)
        raise CompanyNotFoundException(identifier)

    return CompanyPageResponse(
        identifier=identifier,
        title=service.page_title(identifier),
        listings=listings,
    )


def build_profile_router(route_segment: str) -> APIRouter:
    """Route table for the public company pages under route_segment."""
    router = APIRouter(tags=["profiles"])

    @router.get(
        f"/{route_segment}/{{identifier:path}}",
        response_model=CompanyPageResponse,
        responses={404: {"model": ErrorResponse}},
    )
    async def company_page(
        identifier: str,
        service: CompanyDirectoryService = Depends(get_directory_service),
        db: AsyncSession = Depends(get_db),
    ):
        """Jobs listed by one company, matched on name or slug."""
        # Drop only the trailing slash of the URL, names may contain "/"
        if identifier.endswith("/"):
            identifier = identifier[:-1]
        return await render_company_page(identifier, service, db)

    @router.get(
        "/index.php",
        response_model=CompanyPageResponse,
        responses={404: {"model": ErrorResponse}},
    )
    async def company_page_query(
        request: Request,
        service: CompanyDirectoryService = Depends(get_directory_service),
        db: AsyncSession = Depends(get_db),
    ):
        """Same page, addressed as index.php?{segment}={identifier}."""
        identifier = request.query_params.get(route_segment, "")
        return await render_company_page(identifier, service, db)

    return router
