"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown (file-backed SQLite per test)
- Async HTTP client bound to the FastAPI app
- Factories for companies, jobs and applicants
"""

import os

# Settings are read at import time; point them at SQLite before the app loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from jobboard.core.database import Base, build_engine, get_db
from jobboard.main import app


API = "/api/v1"


@pytest.fixture
async def db_engine(tmp_path):
    """
    Fresh database file for each test.

    NullPool gives every session its own connection so concurrent requests
    really contend at the storage layer.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'jobboard.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Session for inspecting stored rows directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """
    Async client with the database dependency overridden.
    """
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    # TrustedHostMiddleware only admits the configured hosts
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://localhost") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_company_data():
    """Sample company data for testing"""
    return {
        "name": "Acme",
        "description": "Backend-heavy product studio",
        "location": "Remote",
        "contact": "jobs@acme.example",
    }


@pytest.fixture
def sample_applicant_data():
    return {
        "name": "Ada Lovelace",
        "contact": "ada@example.com",
        "job_preferences": "Backend, remote, Python",
    }


@pytest.fixture
def create_company(client, sample_company_data):
    async def _create(**overrides):
        response = await client.post(f"{API}/companies", json={**sample_company_data, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_job(client):
    async def _create(company_id, **overrides):
        payload = {
            "title": "Backend Engineer",
            "description": "Build and run our APIs",
            "required_skills": "Python, SQL",
            "experience": "3 years",
            "company_id": company_id,
            **overrides,
        }
        response = await client.post(f"{API}/jobs", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_applicant(client, sample_applicant_data):
    async def _create(**overrides):
        response = await client.post(f"{API}/applicants", json={**sample_applicant_data, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
