from __future__ import annotations

import pytest

from company_profiles.core.exceptions import CompanyNotFoundException
from company_profiles.repositories.listing_repository import ListingRepository
from company_profiles.services.company_service import CompanyDirectoryService


async def _slugs(db, *listings):
    ids = [listing.id for listing in listings]
    db.expire_all()
    repo = ListingRepository()
    return [(await repo.get_by_id(db, listing_id)).company_slug for listing_id in ids]


# ─── resolve_company_listings ─────────────────────────────────


@pytest.mark.asyncio
async def test_acme_scenario(db, make_listing, service):
    open_job = await make_listing("Acme", company_slug="", filled=False, age=2)
    filled_job = await make_listing("Acme", company_slug="", filled=True, age=1)

    visible = await service.resolve_company_listings(db, "Acme", hide_filled=True)
    assert [listing.id for listing in visible] == [open_job.id]

    assert await service.position_count(db, "Acme") == 2

    await service.ensure_company_slugs(db)
    assert await _slugs(db, open_job, filled_job) == ["acme", "acme"]


@pytest.mark.asyncio
async def test_resolve_matches_slug_and_skips_unpublished(db, make_listing, service):
    published = await make_listing("Acme Inc", company_slug="acme-inc", age=2)
    await make_listing("Acme Inc", company_slug="acme-inc", status="draft", age=1)

    found = await service.resolve_company_listings(db, "acme-inc")
    assert [listing.id for listing in found] == [published.id]


@pytest.mark.asyncio
async def test_resolve_unknown_company_is_empty(db, make_listing, service):
    await make_listing("Acme")

    assert await service.resolve_company_listings(db, "Nobody") == []


@pytest.mark.asyncio
async def test_resolve_uses_configured_hide_filled(db, make_listing, test_settings):
    await make_listing("Acme", filled=True)
    open_job = await make_listing("Acme", age=1)

    hiding = CompanyDirectoryService(
        store=ListingRepository(),
        settings=test_settings.model_copy(update={"hide_filled_positions": True}),
    )
    found = await hiding.resolve_company_listings(db, "Acme")
    assert [listing.id for listing in found] == [open_job.id]

    assert len(await hiding.resolve_company_listings(db, "Acme", hide_filled=False)) == 2


@pytest.mark.asyncio
async def test_hiding_filled_gives_a_subset(db, make_listing, service):
    await make_listing("Acme", filled=True, age=3)
    await make_listing("Acme", company_slug="acme", age=2)
    await make_listing("Acme", status="expired", age=1)

    for identifier in ("Acme", "acme", "missing"):
        hidden = await service.resolve_company_listings(db, identifier, hide_filled=True)
        shown = await service.resolve_company_listings(db, identifier, hide_filled=False)
        assert {listing.id for listing in hidden} <= {listing.id for listing in shown}


# ─── search_companies / list_industries ───────────────────────


@pytest.mark.asyncio
async def test_search_companies_dedupes_and_filters(db, make_listing, service):
    await make_listing("Acme", company_location="Berlin", company_industry="Software")
    await make_listing("Acme", company_location="Berlin", company_industry="Software")
    await make_listing("Beta Labs", company_location="Boston", company_industry="Biotech")
    await make_listing("Gamma", company_location="Berlin", company_industry="Biotech")
    await make_listing("Hidden", status="draft", company_location="Berlin")

    assert await service.search_companies(db) == {"Acme", "Beta Labs", "Gamma"}
    assert await service.search_companies(db, keyword="lab") == {"Beta Labs"}
    assert await service.search_companies(db, location="berlin") == {"Acme", "Gamma"}
    assert await service.search_companies(db, location="Berlin", industry="bio") == {"Gamma"}
    assert await service.search_companies(db, keyword="zzz") == set()


@pytest.mark.asyncio
async def test_search_without_filters_equals_empty_filters(db, make_listing, service):
    await make_listing("Acme", company_location="Berlin")
    await make_listing("Beta")

    assert await service.search_companies(db) == await service.search_companies(
        db, keyword="", location="", industry=""
    )


@pytest.mark.asyncio
async def test_list_industries_keeps_empty_bucket_by_default(db, make_listing, service):
    await make_listing("Acme", company_industry="Software")
    await make_listing("Beta", company_industry="Software")
    await make_listing("Gamma", company_industry="")
    await make_listing("Delta")
    await make_listing("Draft Co", company_industry="Mining", status="draft")

    assert await service.list_industries(db) == {"Software", ""}
    assert await service.list_industries(db, include_empty=False) == {"Software"}


# ─── aggregate / count / profile ──────────────────────────────


@pytest.mark.asyncio
async def test_aggregate_includes_every_status(db, make_listing, service):
    newest = await make_listing("Acme", status="draft", age=1)
    oldest = await make_listing("Acme", age=5)
    await make_listing("Acme Two")

    aggregate = await service.aggregate_company(db, "Acme")
    assert aggregate.count == 2
    assert [listing.id for listing in aggregate.listings] == [newest.id, oldest.id]
    assert await service.position_count(db, "Acme") == 2
    assert await service.position_count(db, "Nobody") == 0


@pytest.mark.asyncio
async def test_latest_profile_uses_newest_listing(db, make_listing, service):
    await make_listing(
        "Acme",
        age=10,
        company_description="Old description",
        company_location="Old Town",
    )
    await make_listing(
        "Acme",
        age=1,
        company_slug="acme",
        company_description="",
        company_tagline="We make everything",
        company_location="Berlin",
        company_size="50-100",
        logo_url="https://cdn.example.com/acme.png",
    )

    profile = await service.latest_company_profile(db, "Acme")
    assert profile.name == "Acme"
    assert profile.slug == "acme"
    assert profile.info == "We make everything"
    assert profile.location == "Berlin"
    assert profile.size == "50-100"
    assert profile.logo_url == "https://cdn.example.com/acme.png"


@pytest.mark.asyncio
async def test_latest_profile_prefers_description(db, make_listing, service):
    await make_listing("Acme", company_description="Widgets", company_tagline="Tagline")

    profile = await service.latest_company_profile(db, "Acme")
    assert profile.info == "Widgets"


@pytest.mark.asyncio
async def test_latest_profile_for_unknown_company_is_not_found(db, make_listing, service):
    await make_listing("Acme")

    with pytest.raises(CompanyNotFoundException) as exc_info:
        await service.latest_company_profile(db, "Ghostco")
    assert exc_info.value.status_code == 404
    assert exc_info.value.details == {"company": "Ghostco"}


@pytest.mark.asyncio
async def test_company_summary(db, make_listing, service):
    await make_listing("Acme", age=2, filled=True)
    await make_listing("Acme", age=1, company_slug="acme", company_location="Berlin")

    summary = await service.company_summary(db, "Acme")
    assert summary.position_count == 2
    assert len(summary.listings) == 2
    assert summary.location == "Berlin"
    assert summary.url == "https://jobs.example.com/company/acme/"


@pytest.mark.asyncio
async def test_company_summary_unknown_company(db, service):
    with pytest.raises(CompanyNotFoundException):
        await service.company_summary(db, "Ghostco")


# ─── ensure_company_slugs ─────────────────────────────────────


@pytest.mark.asyncio
async def test_ensure_slugs_leaves_existing_slugs_alone(db, make_listing, service):
    custom = await make_listing("Acme", company_slug="acme-global")
    missing = await make_listing("Café Müller", status="draft")

    result = await service.ensure_company_slugs(db)
    assert result.success is True
    assert result.scanned == 2
    assert result.updated == 1
    assert await _slugs(db, custom, missing) == ["acme-global", "cafe-muller"]


@pytest.mark.asyncio
async def test_ensure_slugs_is_idempotent(db, make_listing, service):
    first = await make_listing("Big Co")
    second = await make_listing("Small Co", company_slug="")

    await service.ensure_company_slugs(db)
    before = await _slugs(db, first, second)

    again = await service.ensure_company_slugs(db)
    assert again.updated == 0
    assert await _slugs(db, first, second) == before == ["big-co", "small-co"]


@pytest.mark.asyncio
async def test_ensure_slugs_skips_names_without_slug_characters(db, make_listing, service):
    odd = await make_listing("!!!")

    result = await service.ensure_company_slugs(db)
    assert result.updated == 0
    assert result.skipped == 1
    assert await _slugs(db, odd) == [None]


@pytest.mark.asyncio
async def test_ensure_slugs_keeps_non_latin_names(db, make_listing, service):
    cyrillic = await make_listing("Яндекс")
    danish = await make_listing("Ørsted")

    result = await service.ensure_company_slugs(db)
    assert result.updated == 2
    assert result.skipped == 0
    assert await _slugs(db, cyrillic, danish) == ["яндекс", "orsted"]


class _RacingRepository(ListingRepository):
    """Sets a slug of its own right before each conditional write."""

    def __init__(self):
        super().__init__()
        self.reread = []

    async def update_listing_field(self, db, listing_id, field, value, *, only_if_empty=False):
        await super().update_listing_field(db, listing_id, field, "acme-hq")
        return await super().update_listing_field(
            db, listing_id, field, value, only_if_empty=only_if_empty
        )

    async def get_by_id(self, db, id):
        self.reread.append(id)
        return await super().get_by_id(db, id)


@pytest.mark.asyncio
async def test_ensure_slugs_does_not_overwrite_concurrent_write(db, make_listing, test_settings):
    listing = await make_listing("Acme")
    store = _RacingRepository()
    service = CompanyDirectoryService(store=store, settings=test_settings)

    result = await service.ensure_company_slugs(db)
    assert result.updated == 0
    assert store.reread == [listing.id]
    assert await _slugs(db, listing) == ["acme-hq"]


# ─── urls / titles ────────────────────────────────────────────


def test_company_url_follows_settings(service, test_settings):
    assert service.company_url("acme", "Acme") == "https://jobs.example.com/company/acme/"

    plain = CompanyDirectoryService(
        settings=test_settings.model_copy(
            update={"pretty_permalinks": False, "company_route_segment": "employer"}
        ),
    )
    assert plain.company_url("", "Big Co") == "https://jobs.example.com/index.php?employer=Big%20Co"


def test_page_title(service):
    assert service.page_title("Acme") == "Jobs at Acme - Example Jobs"
