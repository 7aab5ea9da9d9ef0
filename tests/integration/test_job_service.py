"""Integration tests for the job catalog."""

from datetime import timedelta

import pytest

from conftest import seed_job, utc_now
from jobboard.core.exceptions import NotFoundError, ValidationError
from jobboard.services.bookmark_service import BookmarkLedger
from jobboard.services.job_service import JobCatalog


@pytest.fixture
def catalog(db):
    return JobCatalog(db)


class TestJobCatalog:
    """Test job queries."""

    @pytest.mark.asyncio
    async def test_only_jobs_inside_visibility_window_are_listed(self, catalog):
        fresh = await seed_job("Fresh", visible_days_ago=1)
        await seed_job("Stale", visible_days_ago=45, company_name="Old Co")
        await seed_job("Future", visible_days_ago=-3, company_name="Soon Co")
        await seed_job("Draft", visible_days_ago=None, company_name="Draft Co")

        jobs = await catalog.get_jobs()

        assert [job.public_id for job in jobs] == [fresh.public_id]

    @pytest.mark.asyncio
    async def test_jobs_are_newest_first_with_company_loaded(self, catalog):
        await seed_job("Older", visible_days_ago=10)
        await seed_job("Newer", visible_days_ago=2, company_name="Beta")

        jobs = await catalog.get_jobs()

        assert [job.title for job in jobs] == ["Newer", "Older"]
        assert jobs[0].employer.company.name == "Beta"

    @pytest.mark.asyncio
    async def test_explicit_now_moves_the_window(self, catalog):
        job = await seed_job("Old", visible_days_ago=45)

        jobs = await catalog.get_jobs(now=utc_now() - timedelta(days=40))

        assert [j.public_id for j in jobs] == [job.public_id]

    @pytest.mark.asyncio
    async def test_get_job_ignores_visibility(self, catalog):
        job = await seed_job("Stale", visible_days_ago=90)

        found = await catalog.get_job(job.public_id)

        assert found.title == "Stale"
        assert found.employer.company.name == "Acme"

    @pytest.mark.asyncio
    async def test_get_missing_job(self, catalog):
        with pytest.raises(NotFoundError):
            await catalog.get_job("no-such-job")

    @pytest.mark.asyncio
    async def test_get_job_requires_id(self, catalog):
        with pytest.raises(ValidationError):
            await catalog.get_job("")

    @pytest.mark.asyncio
    async def test_jobs_by_zipcodes(self, catalog):
        near = await seed_job("Near", zipcode="10001")
        also_near = await seed_job("Also near", zipcode="10002", company_name="Beta")
        await seed_job("Far", zipcode="94103", company_name="West")
        await seed_job("Near but stale", zipcode="10001", visible_days_ago=60, company_name="Gone")

        jobs = await catalog.get_jobs_by_zipcodes(["10001", "10002"])

        assert {job.public_id for job in jobs} == {near.public_id, also_near.public_id}

    @pytest.mark.asyncio
    async def test_jobs_by_no_zipcodes(self, catalog):
        await seed_job()

        assert await catalog.get_jobs_by_zipcodes([]) == []

    @pytest.mark.asyncio
    async def test_bookmarked_jobs(self, catalog, db):
        saved = await seed_job("Saved")
        await seed_job("Not saved", company_name="Beta")
        ledger = BookmarkLedger(db)
        await ledger.create("a-1", saved.public_id)
        await ledger.create("a-2", saved.public_id)

        jobs = await catalog.get_bookmarked_jobs("a-1")

        assert [job.public_id for job in jobs] == [saved.public_id]
