"""
Test suite for job endpoints.
"""

from bson import ObjectId


class TestJobCreation:
    """Tests for POST /api/jobs"""

    def test_create_job(self, client):
        response = client.post("/api/jobs", json={
            "title": "Platform Engineer",
            "company": "Acme Corp",
            "location": "Remote",
            "jobType": "contract",
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "Platform Engineer"
        assert data["jobType"] == "contract"
        assert data["isActive"] is True
        assert data["applicationCount"] == 0
        assert ObjectId.is_valid(data["_id"])

    def test_create_job_missing_company(self, client):
        response = client.post("/api/jobs", json={"title": "Platform Engineer"})

        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"


class TestJobRetrieval:
    """Tests for GET /api/jobs and GET /api/jobs/{id}"""

    def test_get_job(self, client, job):
        response = client.get(f"/api/jobs/{job['_id']}")

        assert response.status_code == 200
        assert response.json()["data"]["company"] == job["company"]

    def test_get_nonexistent_job(self, client):
        response = client.get(f"/api/jobs/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"

    def test_get_malformed_id(self, client):
        response = client.get("/api/jobs/12345")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid job ID"

    def test_list_and_search(self, client, make_job):
        make_job(title="Python Developer", company="Acme")
        make_job(title="Java Developer", company="Globex")
        make_job(title="Senior Python Engineer", company="Initech")

        everything = client.get("/api/jobs").json()
        python_only = client.get("/api/jobs", params={"search": "python"}).json()
        globex = client.get("/api/jobs", params={"company": "globex"}).json()

        assert everything["pagination"] == {"current": 1, "total": 1, "count": 3, "totalJobs": 3}
        assert {job["title"] for job in python_only["data"]} == {"Python Developer", "Senior Python Engineer"}
        assert [job["title"] for job in globex["data"]] == ["Java Developer"]

    def test_search_is_literal(self, client, make_job):
        make_job(title="C++ Developer")

        response = client.get("/api/jobs", params={"search": "c++"})

        assert response.status_code == 200
        assert [job["title"] for job in response.json()["data"]] == ["C++ Developer"]


class TestEnvelope:
    """Errors outside the API routes still use the envelope"""

    def test_unknown_route(self, client):
        response = client.get("/api/nowhere")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Route not found"
        assert body["path"] == "/api/nowhere"

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"]["applications"] == "/api/applications"
