"""
Generate company slugs for listings that don't have one yet.

Usage:
    python -m scripts.backfill_company_slugs

The app also does this on startup (BACKFILL_SLUGS_ON_STARTUP). Running it
again is harmless: listings that already have a slug are left alone.
"""
import asyncio

from company_profiles.core.database import async_session_maker, close_db, init_db
from company_profiles.core.logging import setup_logging
from company_profiles.services.company_service import CompanyDirectoryService


async def backfill():
    setup_logging()
    await init_db()

    service = CompanyDirectoryService()
    try:
        async with async_session_maker() as db:
            result = await service.ensure_company_slugs(db)
            await db.commit()
    finally:
        await close_db()

    print(
        f"Scanned {result.scanned} listings: "
        f"{result.updated} slugs generated, {result.skipped} skipped"
    )


if __name__ == "__main__":
    asyncio.run(backfill())
