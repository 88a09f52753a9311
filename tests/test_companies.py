"""
Test suite for company endpoints.

Tests cover:
- Creation and validation
- Listing and retrieval with jobs
- Partial updates
- Deletion of a company with its jobs and applications
"""

import uuid

import pytest
from sqlalchemy import func, select

from jobboard.models.job import Job
from jobboard.models.job_applicant import JobApplicant

API = "/api/v1"


class TestCompanyCreation:
    async def test_create_company_success(self, client, sample_company_data):
        response = await client.post(f"{API}/companies", json=sample_company_data)

        assert response.status_code == 201
        data = response.json()
        uuid.UUID(data["id"])
        assert data["name"] == "Acme"
        assert data["location"] == "Remote"
        assert "created_at" in data

    async def test_create_company_strips_whitespace(self, client, sample_company_data):
        response = await client.post(
            f"{API}/companies",
            json={**sample_company_data, "name": "  Acme  "},
        )

        assert response.status_code == 201
        assert response.json()["name"] == "Acme"

    @pytest.mark.parametrize("field", ["name", "description", "location", "contact"])
    async def test_create_company_missing_field(self, client, sample_company_data, field):
        payload = {k: v for k, v in sample_company_data.items() if k != field}

        response = await client.post(f"{API}/companies", json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Validation error"
        assert body["status_code"] == 422

    async def test_create_company_blank_name(self, client, sample_company_data):
        response = await client.post(f"{API}/companies", json={**sample_company_data, "name": "     "})

        assert response.status_code == 422


class TestCompanyRetrieval:
    async def test_list_companies_empty(self, client):
        response = await client.get(f"{API}/companies")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_companies_sorted_by_name(self, client, create_company):
        await create_company(name="Globex")
        await create_company(name="Acme")

        response = await client.get(f"{API}/companies")

        assert [c["name"] for c in response.json()] == ["Acme", "Globex"]

    async def test_get_company_with_jobs(self, client, create_company, create_job):
        company = await create_company()
        job = await create_job(company["id"])

        response = await client.get(f"{API}/companies/{company['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == company["id"]
        assert [j["id"] for j in data["jobs"]] == [job["id"]]

    async def test_get_nonexistent_company(self, client):
        missing = str(uuid.uuid4())

        response = await client.get(f"{API}/companies/{missing}")

        assert response.status_code == 404
        body = response.json()
        assert body["details"] == {"id": missing}
        assert body["status_code"] == 404

    async def test_get_company_malformed_id(self, client):
        response = await client.get(f"{API}/companies/not-a-uuid")

        assert response.status_code == 422


class TestCompanyUpdate:
    async def test_partial_update_keeps_other_fields(self, client, create_company):
        company = await create_company()

        response = await client.put(f"{API}/companies/{company['id']}", json={"location": "Lisbon"})

        assert response.status_code == 200
        data = response.json()
        assert data["location"] == "Lisbon"
        assert data["name"] == company["name"]
        assert data["contact"] == company["contact"]

    async def test_null_fields_are_ignored(self, client, create_company):
        company = await create_company()

        response = await client.put(
            f"{API}/companies/{company['id']}",
            json={"name": "Acme Corp", "location": None},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Acme Corp"
        assert response.json()["location"] == company["location"]

    async def test_empty_update_rejected(self, client, create_company):
        company = await create_company()

        response = await client.put(f"{API}/companies/{company['id']}", json={})

        assert response.status_code == 422
        assert response.json()["error"] == "No attributes to update"

    async def test_blank_name_rejected(self, client, create_company):
        company = await create_company()

        response = await client.put(f"{API}/companies/{company['id']}", json={"name": "   "})

        assert response.status_code == 422

    async def test_update_strips_whitespace(self, client, create_company):
        company = await create_company()

        response = await client.put(f"{API}/companies/{company['id']}", json={"location": "  Lisbon "})

        assert response.status_code == 200
        assert response.json()["location"] == "Lisbon"

    async def test_update_rejects_value_short_after_stripping(self, client, create_company):
        company = await create_company()

        response = await client.put(f"{API}/companies/{company['id']}", json={"location": "  x "})

        assert response.status_code == 422

    async def test_update_nonexistent_company(self, client):
        response = await client.put(f"{API}/companies/{uuid.uuid4()}", json={"name": "Nobody"})

        assert response.status_code == 404


class TestCompanyDeletion:
    async def test_delete_company_removes_jobs_and_applications(
            self, client, db_session, create_company, create_job, create_applicant
    ):
        company = await create_company()
        survivor_company = await create_company(name="Globex")
        job = await create_job(company["id"])
        survivor = await create_job(survivor_company["id"])
        applicant = await create_applicant()
        for target in (job, survivor):
            await client.post(
                f"{API}/job_applicant",
                json={"job_id": target["id"], "applicant_id": applicant["id"]},
            )

        response = await client.delete(f"{API}/companies/{company['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Company deleted successfully",
            "data": {"id": company["id"]},
        }
        assert (await client.get(f"{API}/jobs/{job['id']}")).status_code == 404

        jobs_left = await db_session.scalar(select(func.count()).select_from(Job))
        edges_left = await db_session.scalar(select(func.count()).select_from(JobApplicant))
        assert jobs_left == 1
        assert edges_left == 1

        applied = await client.get(f"{API}/applicants/{applicant['id']}/jobs")
        assert [j["id"] for j in applied.json()] == [survivor["id"]]

    async def test_delete_nonexistent_company(self, client):
        response = await client.delete(f"{API}/companies/{uuid.uuid4()}")

        assert response.status_code == 404
