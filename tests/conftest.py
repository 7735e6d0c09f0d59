"""Pytest fixtures for Job Tracker tests."""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from job_tracker.models import Job
from job_tracker.persistence.models import Base
from job_tracker.persistence.store import InMemoryKeyValueStore
from job_tracker.preferences import PreferenceProfile


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def memory_database(monkeypatch):
    """Point the session helpers used by main() at a shared in-memory database."""
    from job_tracker.persistence import database

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(
        database, "SessionLocal", sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )
    return engine


# =============================================================================
# JOB FIXTURES
# =============================================================================


def make_job(**overrides) -> Job:
    """Build a job that matches nothing unless overridden."""
    values = dict(
        id=1,
        title="Office Administrator",
        company="Plain Co",
        location="Nowhere",
        mode="Onsite",
        experience="3-5",
        source="Indeed",
        posted_days_ago=30,
        salary_range="",
        description="Administrative duties.",
        skills=(),
        apply_url="https://example.com/jobs/1",
    )
    values.update(overrides)
    return Job(**values)


@pytest.fixture
def job_factory():
    """Factory fixture for jobs; unspecified fields never score points."""
    return make_job


@pytest.fixture
def sample_job():
    """A job that satisfies every rule of sample_profile."""
    return Job(
        id=7,
        title="Senior React Developer",
        company="Acme Labs",
        location="Bengaluru, India",
        mode="Remote",
        experience="1-3",
        source="LinkedIn",
        posted_days_ago=1,
        salary_range="12-18 LPA",
        description="Own our React frontend and design system.",
        skills=("React", "TypeScript"),
        apply_url="https://example.com/jobs/7",
    )


@pytest.fixture
def sample_jobs():
    """A small mixed dataset."""
    return (
        make_job(
            id=1,
            title="Frontend Developer",
            company="Acme Labs",
            location="Bengaluru",
            mode="Remote",
            experience="1-3",
            source="LinkedIn",
            posted_days_ago=5,
            salary_range="$50,000",
            skills=("React", "CSS"),
        ),
        make_job(
            id=2,
            title="Backend Engineer",
            company="Northwind",
            location="Pune",
            mode="Hybrid",
            experience="3-5",
            source="Naukri",
            posted_days_ago=0,
            salary_range="$120,000",
            skills=("Python",),
        ),
        make_job(
            id=3,
            title="Data Analyst",
            company="Globex",
            location="Remote, India",
            mode="Remote",
            experience="Fresher",
            source="Indeed",
            posted_days_ago=2,
            salary_range="abc",
            skills=("SQL",),
        ),
    )


@pytest.fixture
def sample_profile():
    """A profile with every preference set."""
    return PreferenceProfile(
        role_keywords=["react"],
        preferred_locations=["bengaluru"],
        preferred_mode=["Remote"],
        experience_level="1-3",
        skills=["typescript"],
        min_match_score=40,
    )
