from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time; keep tests off postgres and off .env
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["BACKFILL_SLUGS_ON_STARTUP"] = "false"

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import company_profiles.models  # noqa: F401
from company_profiles.core.config import Settings
from company_profiles.core.database import Base
from company_profiles.models.job_listing import JobListing
from company_profiles.repositories.listing_repository import ListingRepository
from company_profiles.services.company_service import CompanyDirectoryService

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def db():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        site_url="https://jobs.example.com",
        site_name="Example Jobs",
        hide_filled_positions=False,
    )


@pytest.fixture
def service(test_settings) -> CompanyDirectoryService:
    return CompanyDirectoryService(store=ListingRepository(), settings=test_settings)


@pytest.fixture
def make_listing(db):
    """Insert a listing; `age` is how many hours before BASE_TIME it was posted."""

    async def _make(company_name: str = "Acme", *, age: int = 0, **fields) -> JobListing:
        fields.setdefault("title", f"{company_name} role")
        listing = JobListing(
            company_name=company_name,
            created_at=BASE_TIME - timedelta(hours=age),
            **fields,
        )
        db.add(listing)
        await db.flush()
        await db.refresh(listing)
        return listing

    return _make
