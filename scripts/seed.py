"""
Seed script - populates the database with sample job listings for development.

Usage:
    python -m scripts.seed

Listings are created without company slugs on purpose, the way job posters
submit them; run scripts/backfill_company_slugs.py (or start the app) to
generate them.

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing data before inserting.
"""
import asyncio
from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from company_profiles.core.database import async_session_maker, init_db
from company_profiles.models.job_listing import JobListing


# ─── Companies ─────────────────────────────────────────────────
# Company metadata is repeated on every listing; the newest listing wins
# when a company profile is built.

COMPANIES = {
    "Safaricom": {
        "company_location": "Nairobi, Kenya",
        "company_industry": "Telecommunications",
        "company_size": "5000+",
        "company_description": "Kenya's leading telecommunications company",
        "logo_url": "https://logo.clearbit.com/safaricom.co.ke",
    },
    "Café Müller": {
        "company_location": "Berlin, Germany",
        "company_industry": "Hospitality",
        "company_size": "10-50",
        "company_tagline": "Coffee, cake and code",
    },
    "GitLab": {
        "company_location": "Remote",
        "company_industry": "Software",
        "company_size": "1000-5000",
        "company_description": "DevOps platform, all-remote company",
        "logo_url": "https://logo.clearbit.com/gitlab.com",
    },
    "Plaid": {
        "company_location": "San Francisco, USA",
        "company_industry": "Fintech",
        "company_size": "500-1000",
        "logo_url": "https://logo.clearbit.com/plaid.com",
    },
}


# ─── Listings ──────────────────────────────────────────────────
# (company, title, status, filled, days_ago)

LISTINGS = [
    ("Safaricom", "Backend Engineer", "publish", False, 1),
    ("Safaricom", "Data Analyst", "publish", True, 4),
    ("Safaricom", "Network Engineer", "expired", False, 40),
    ("Café Müller", "Barista Team Lead", "publish", False, 2),
    ("GitLab", "Senior Frontend Engineer", "publish", False, 3),
    ("GitLab", "Site Reliability Engineer", "draft", False, 0),
    ("Plaid", "Product Manager", "publish", False, 6),
]


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        existing = await db.execute(select(JobListing).limit(1))
        if existing.scalar_one_or_none():
            print("  Listings already exist, skipping...")
            return

        now = datetime.now(timezone.utc)
        for company_name, title, status, filled, days_ago in LISTINGS:
            db.add(JobListing(
                title=title,
                status=status,
                filled=filled,
                company_name=company_name,
                created_at=now - timedelta(days=days_ago),
                **COMPANIES[company_name],
            ))

        await db.commit()
        print(f"  Created {len(LISTINGS)} listings for {len(COMPANIES)} companies")
        print()
        print("Seed complete!")


if __name__ == "__main__":
    asyncio.run(seed())
