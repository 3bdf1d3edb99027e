"""
Company directory routes.

Thin controllers - CompanyDirectoryService decides which listings belong
to a company and builds the responses.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from company_profiles.api.deps import get_directory_service
from company_profiles.core.database import get_db
from company_profiles.schemas.base import ErrorResponse
from company_profiles.schemas.company import (
    CompanyListResponse,
    CompanySummary,
    IndustryListResponse,
    PositionCountResponse,
)
from company_profiles.services.company_service import CompanyDirectoryService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("/", response_model=CompanyListResponse)
async def search_companies(
    keyword: Optional[str] = Query(None, description="Company name contains"),
    location: Optional[str] = Query(None, description="Company location contains"),
    industry: Optional[str] = Query(None, description="Company industry contains"),
    service: CompanyDirectoryService = Depends(get_directory_service),
    db: AsyncSession = Depends(get_db),
):
    """List companies with published jobs, optionally filtered."""
    names = await service.search_companies(
        db,
        keyword=keyword,
        location=location,
        industry=industry,
    )
    items = sorted(names)
    return CompanyListResponse(items=items, total=len(items))


@router.get("/industries", response_model=IndustryListResponse)
async def list_industries(
    service: CompanyDirectoryService = Depends(get_directory_service),
    db: AsyncSession = Depends(get_db),
):
    """List the industries of companies with published jobs."""
    items = sorted(await service.list_industries(db))
    return IndustryListResponse(items=items, total=len(items))


@router.get(
    "/{company_name}/profile",
    response_model=CompanySummary,
    responses={404: {"model": ErrorResponse}},
)
async def get_company(
    company_name: str,
    service: CompanyDirectoryService = Depends(get_directory_service),
    db: AsyncSession = Depends(get_db),
):
    """Company profile with position count and every listing."""
    return await service.company_summary(db, company_name)


@router.get("/{company_name}/positions", response_model=PositionCountResponse)
async def get_position_count(
    company_name: str,
    service: CompanyDirectoryService = Depends(get_directory_service),
    db: AsyncSession = Depends(get_db),
):
    """Number of listings a company has posted. Unknown companies have 0."""
    count = await service.position_count(db, company_name)
    return PositionCountResponse(company=company_name, count=count)
