"""Test configuration and fixtures."""

import os
import tempfile

# Keep test logs out of the project tree; must happen before jobboard is imported
TEST_LOG_DIR = tempfile.mkdtemp(prefix="jobboard_test_logs_")
os.environ["LOG_DIR"] = TEST_LOG_DIR

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from jobboard.config import Settings
from jobboard.db.repository import JobBoardRepository
from jobboard.db.store import KeyValueStore
from jobboard.services.api import create_app


@pytest.fixture
def test_settings():
    """Settings for an in-memory store with no simulated latency."""
    return Settings(
        store_path=":memory:",
        api_delay_seconds=0,
        default_page_size=6,
        seed_on_startup=True,
    )


@pytest_asyncio.fixture
async def store():
    """An open, unseeded in-memory store."""
    store = await KeyValueStore(":memory:").ainit()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def seeded_store(store):
    """An in-memory store holding the six fixture jobs."""
    await store.seed()
    return store


@pytest.fixture
def repository(seeded_store):
    return JobBoardRepository(seeded_store, api_delay=0, default_page_size=6)


@pytest.fixture
def client(test_settings):
    """A TestClient whose app lifespan has opened and seeded the store."""
    with TestClient(create_app(test_settings)) as client:
        yield client


@pytest.fixture
def new_job_payload():
    return {
        "title": "Backend Engineer",
        "company": "Northwind Remote Labs",
        "location": "Remote",
        "employmentType": "Contract",
        "category": "Technology",
        "description": "Build and operate our Python services.",
        "responsibilities": ["Design APIs", "Review code"],
        "requirements": ["Python", "FastAPI"],
        "salary": {"min": 90, "max": 110, "currency": "CAD/hr", "visible": True},
        "featured": False,
        "applicationDeadline": "2024-09-30T12:00:00.000Z",
    }


@pytest.fixture
def application_payload():
    return {
        "fullName": "Jordan Example",
        "email": "jordan@example.com",
        "phone": "555-0100",
        "address": "",
        "availability": ["Full-time", "Contract"],
        "desiredIndustries": "Technology",
        "skills": "Python, SQL",
        "workHistory": "Analyst at Acme",
        "coverLetter": "",
        "resume": "data:application/pdf;base64,JVBERi0xLjQK",
        "resumeFilename": "resume.pdf",
        "jobTitle": "Data Analyst",
        "dataConsent": True,
    }


@pytest.fixture
def inquiry_payload():
    return {
        "companyName": "Acme Staffing",
        "contactPerson": "Sam Lee",
        "email": "sam@acme.example",
        "phone": "555-0199",
        "staffingNeed": "Two warehouse associates for the holiday season.",
    }
