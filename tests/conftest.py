"""Pytest configuration and fixtures."""

import asyncio
import os
import sys
import tempfile
from datetime import UTC, datetime, timedelta

import pytest

# Add the project directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing jobboard modules
# Use direct assignment to override any .env values
_db_dir = tempfile.mkdtemp(prefix="jobboard-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/test.db"
os.environ["TOKEN_SECRET"] = "test-token-secret-with-enough-entropy"
os.environ["API_KEY"] = "test-api-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["MAILGUN_DOMAIN"] = ""
os.environ["MAILGUN_API_KEY"] = ""
os.environ["ZIPCODE_API_KEY"] = ""

from jobboard.core.storage import Storage, async_session  # noqa: E402
from jobboard.models.applicant import Applicant  # noqa: E402
from jobboard.models.job import Company, Employer, Job  # noqa: E402
from jobboard.services.email.base import EmailSender  # noqa: E402
from jobboard.services.geocoding.base import Geocoder, ZipCode  # noqa: E402


class FakeEmailSender(EmailSender):
    """Captures welcome messages instead of sending them."""

    def __init__(self, fail_with: Exception | None = None):
        self.fail_with = fail_with
        self.sent: list[tuple[str, str]] = []

    async def send_welcome_message(self, applicant: Applicant, password: str) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((applicant.email, password))
        return f"<message-{len(self.sent)}@test>"

    def password_for(self, email: str) -> str:
        for recipient, password in reversed(self.sent):
            if recipient == email:
                return password
        raise AssertionError(f"No welcome message sent to {email}")


class FakeGeocoder(Geocoder):
    """In-memory zip code lookups."""

    def __init__(
        self,
        coordinates: dict[str, tuple[float, float]] | None = None,
        radius: dict[str, list[str]] | None = None,
        suggestions: list[dict] | None = None,
        fail_with: Exception | None = None,
    ):
        self.coordinates = coordinates or {"10001": (40.7506, -73.9972)}
        self.radius = radius or {}
        self.suggestions = suggestions or []
        self.fail_with = fail_with
        self.calls: list[tuple[str, str]] = []

    async def get_zip_code(self, zipcode: str) -> ZipCode:
        self.calls.append(("get_zip_code", zipcode))
        if self.fail_with is not None:
            raise self.fail_with
        latitude, longitude = self.coordinates.get(zipcode, (0.0, 0.0))
        return ZipCode(zip_code=zipcode, latitude=latitude, longitude=longitude)

    async def get_zip_codes_in_radius(self, zipcode: str, radius: float) -> list[ZipCode]:
        self.calls.append(("get_zip_codes_in_radius", zipcode))
        if self.fail_with is not None:
            raise self.fail_with
        return [ZipCode(zip_code=z) for z in self.radius.get(zipcode, [])]

    async def autocomplete(self, chars: str) -> list[dict]:
        self.calls.append(("autocomplete", chars))
        if self.fail_with is not None:
            raise self.fail_with
        return self.suggestions


def utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


async def seed_job(
    title: str = "Backend Engineer",
    zipcode: str = "10001",
    visible_days_ago: int | None = 1,
    company_name: str = "Acme",
) -> Job:
    """Insert a company, employer and job; return the job."""
    async with async_session() as session:
        company = Company(
            name=company_name,
            url="https://acme.example",
            logo="https://acme.example/logo.png",
            location="New York, NY",
            zipcode=zipcode,
        )
        session.add(company)
        await session.flush()

        employer = Employer(
            email=f"hiring-{company.public_id}@acme.example",
            company_id=company.id,
        )
        session.add(employer)
        await session.flush()

        visible_date = None
        if visible_days_ago is not None:
            visible_date = utc_now() - timedelta(days=visible_days_ago)

        job = Job(
            title=title,
            job_type="full-time",
            category="engineering",
            description="Build and run services.",
            visible_date=visible_date,
            remote=True,
            min_salary=100000,
            max_salary=150000,
            pay_period="year",
            employer_id=employer.id,
        )
        session.add(job)
        await session.commit()
        return job


def run(coro):
    """Run a coroutine from synchronous test code."""
    return asyncio.run(coro)


@pytest.fixture
def fake_email_sender():
    return FakeEmailSender()


@pytest.fixture
def fake_geocoder():
    return FakeGeocoder()


@pytest.fixture
async def db():
    """Fresh schema for service-level tests."""
    await Storage.reset_models()
    yield async_session


@pytest.fixture
def test_client(fake_email_sender, fake_geocoder):
    """API client with external collaborators replaced by fakes."""
    from fastapi.testclient import TestClient

    from jobboard.main import app
    from jobboard.services.dependencies import get_email_sender, get_geocoder

    run(Storage.reset_models())

    app.dependency_overrides[get_email_sender] = lambda: fake_email_sender
    app.dependency_overrides[get_geocoder] = lambda: fake_geocoder
    with TestClient(app, headers={"X-API-Key": "test-api-key"}) as client:
        yield client
    app.dependency_overrides.clear()


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def signup_and_login(
    client,
    email_sender: FakeEmailSender,
    email: str = "ada@example.com",
    first_name: str = "Ada",
    last_name: str = "Lovelace",
) -> tuple[dict[str, str], str]:
    """Sign up through the API and log in with the e-mailed password.

    Returns the auth headers and the temporary password.
    """
    response = client.post(
        "/applicant/signup",
        json={"firstname": first_name, "lastname": last_name, "email": email},
    )
    assert response.status_code == 200, response.text

    password = email_sender.password_for(email)
    response = client.post(
        "/applicant/login", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return auth_headers(response.json()["token"]), password


@pytest.fixture
def signed_in(test_client, fake_email_sender):
    """Headers and temporary password for a freshly signed-up applicant."""
    return signup_and_login(test_client, fake_email_sender)
