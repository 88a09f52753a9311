"""
Test suite for applicant endpoints.
"""

import uuid

API = "/api/v1"


class TestApplicantCrud:
    async def test_create_applicant(self, client, sample_applicant_data):
        response = await client.post(f"{API}/applicants", json=sample_applicant_data)

        assert response.status_code == 201
        data = response.json()
        uuid.UUID(data["id"])
        assert data["name"] == "Ada Lovelace"
        assert data["job_preferences"] == "Backend, remote, Python"

    async def test_create_applicant_short_name(self, client, sample_applicant_data):
        response = await client.post(f"{API}/applicants", json={**sample_applicant_data, "name": "Al"})

        assert response.status_code == 422

    async def test_list_applicants(self, client, create_applicant):
        await create_applicant(name="Grace Hopper")
        await create_applicant(name="Ada Lovelace")

        response = await client.get(f"{API}/applicants")

        assert response.status_code == 200
        assert [a["name"] for a in response.json()] == ["Ada Lovelace", "Grace Hopper"]

    async def test_get_applicant(self, client, create_applicant):
        applicant = await create_applicant()

        response = await client.get(f"{API}/applicants/{applicant['id']}")

        assert response.status_code == 200
        assert response.json()["contact"] == "ada@example.com"

    async def test_get_nonexistent_applicant(self, client):
        missing = str(uuid.uuid4())

        response = await client.get(f"{API}/applicants/{missing}")

        assert response.status_code == 404
        assert response.json()["details"] == {"id": missing}

    async def test_partial_update(self, client, create_applicant):
        applicant = await create_applicant()

        response = await client.put(
            f"{API}/applicants/{applicant['id']}",
            json={"job_preferences": "Data engineering"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["job_preferences"] == "Data engineering"
        assert data["name"] == applicant["name"]

    async def test_empty_update_rejected(self, client, create_applicant):
        applicant = await create_applicant()

        response = await client.put(f"{API}/applicants/{applicant['id']}", json={})

        assert response.status_code == 422
        assert response.json()["error"] == "No attributes to update"

    async def test_delete_applicant_removes_applications(
            self, client, create_applicant, create_company, create_job
    ):
        company = await create_company()
        job = await create_job(company["id"])
        applicant = await create_applicant()
        await client.post(f"{API}/job_applicant", json={"job_id": job["id"], "applicant_id": applicant["id"]})

        response = await client.delete(f"{API}/applicants/{applicant['id']}")

        assert response.status_code == 200
        assert response.json()["message"] == "Applicant deleted successfully"
        applicants = await client.get(f"{API}/jobs/{job['id']}/applicants")
        assert applicants.json() == []

    async def test_blank_name_rejected(self, client, create_applicant):
        applicant = await create_applicant()

        response = await client.put(f"{API}/applicants/{applicant['id']}", json={"name": "     "})

        assert response.status_code == 422

    async def test_delete_nonexistent_applicant(self, client):
        response = await client.delete(f"{API}/applicants/{uuid.uuid4()}")

        assert response.status_code == 404
