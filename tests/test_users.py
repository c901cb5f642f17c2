"""
Test suite for users: provisioning, sign-in sync and saved jobs.
"""

import pytest
from bson import ObjectId

from app.core.exceptions import ConflictError
from app.schemas.schemas import UserType
from app.services.user_service import UserService, placeholder_email


class TestEnsureUser:
    """Tests for UserService.ensure_user"""

    def test_creates_with_placeholders(self, mongo_db):
        user = UserService(mongo_db).ensure_user("user_2xyZ")

        assert user["externalUserId"] == "user_2xyZ"
        assert user["email"] == "2xyz@jobhub.app"
        assert user["firstName"] == "Job"
        assert user["lastName"] == "Seeker"
        assert user["userType"] == "job_seeker"
        assert user["savedJobs"] == []

    def test_idempotent(self, mongo_db):
        service = UserService(mongo_db)

        first = service.ensure_user("user_2abc")
        second = service.ensure_user("user_2abc", email="other@example.com", first_name="Changed")

        assert first["_id"] == second["_id"]
        assert second["email"] == "2abc@jobhub.app"
        assert second["firstName"] == "Job"
        assert mongo_db.users.count_documents({}) == 1

    def test_uses_supplied_details(self, mongo_db):
        user = UserService(mongo_db).ensure_user(
            "user_emp", email=" HR@Acme.com ", first_name="Hana", last_name="Ro", user_type=UserType.employer
        )

        assert user["email"] == "hr@acme.com"
        assert user["firstName"] == "Hana"
        assert user["userType"] == "employer"

    def test_placeholder_email_only_strips_prefix(self):
        assert placeholder_email("user_abc") == "abc@jobhub.app"
        assert placeholder_email("google-oauth2|123") == "google-oauth2|123@jobhub.app"
        assert placeholder_email("user_abc", suffix="65f0") == "abc+65f0@jobhub.app"

    @pytest.mark.parametrize("first_id, second_id", [("user_2AbC", "user_2aBc"), ("user_abc", "abc")])
    def test_placeholder_collision_still_creates_user(self, mongo_db, first_id, second_id):
        service = UserService(mongo_db)

        first = service.ensure_user(first_id)
        second = service.ensure_user(second_id)

        assert first["_id"] != second["_id"]
        assert second["externalUserId"] == second_id
        assert second["email"] == placeholder_email(second_id, suffix=str(second["_id"]))
        assert mongo_db.users.count_documents({}) == 2
        assert service.ensure_user(second_id)["_id"] == second["_id"]

    def test_supplied_email_taken_is_conflict(self, mongo_db):
        service = UserService(mongo_db)
        service.ensure_user("user_1", email="ann@example.com")

        with pytest.raises(ConflictError) as exc_info:
            service.ensure_user("user_2", email="Ann@Example.com")

        assert exc_info.value.status_code == 409
        assert mongo_db.users.count_documents({}) == 1

    def test_lost_creation_race_returns_existing(self, mongo_db, monkeypatch):
        existing = UserService(mongo_db).ensure_user("user_race", email="race@example.com")
        service = UserService(mongo_db)
        real_lookup = service.get_by_external_id
        calls = []

        def lookup_misses_once(external_user_id):
            calls.append(external_user_id)
            return None if len(calls) == 1 else real_lookup(external_user_id)

        monkeypatch.setattr(service, "get_by_external_id", lookup_misses_once)

        user = service.ensure_user("user_race", email="race@example.com")

        assert user["_id"] == existing["_id"]
        assert len(calls) == 2
        assert mongo_db.users.count_documents({}) == 1


class TestUserSync:
    """Tests for POST /api/users/sync and GET /api/users/{id}"""

    def test_sync_creates_then_updates(self, client, mongo_db):
        created = client.post("/api/users/sync", json={"externalUserId": "user_1", "email": "Ann@Example.com"})
        assert created.status_code == 200
        assert created.json()["data"]["email"] == "ann@example.com"

        updated = client.post("/api/users/sync", json={
            "externalUserId": "user_1",
            "firstName": "Ann",
            "lastName": "Lee",
            "userType": "employer",
        })

        data = updated.json()["data"]
        assert data["firstName"] == "Ann"
        assert data["lastName"] == "Lee"
        assert data["userType"] == "employer"
        assert data["email"] == "ann@example.com"
        assert mongo_db.users.count_documents({}) == 1

    def test_sync_email_taken_by_other_user(self, client):
        client.post("/api/users/sync", json={"externalUserId": "user_1", "email": "ann@example.com"})
        client.post("/api/users/sync", json={"externalUserId": "user_2", "email": "bo@example.com"})

        response = client.post("/api/users/sync", json={"externalUserId": "user_2", "email": "ann@example.com"})

        assert response.status_code == 409
        assert response.json()["success"] is False

    def test_get_user(self, client):
        client.post("/api/users/sync", json={"externalUserId": "user_1"})

        response = client.get("/api/users/user_1")

        assert response.status_code == 200
        assert response.json()["data"]["externalUserId"] == "user_1"
        assert response.json()["data"]["fullName"] == "Job Seeker"

    def test_sync_returns_full_name(self, client):
        response = client.post("/api/users/sync", json={"externalUserId": "user_1", "firstName": "Ann", "lastName": "Lee"})

        assert response.json()["data"]["fullName"] == "Ann Lee"

    def test_get_unknown_user(self, client):
        response = client.get("/api/users/user_ghost")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}


class TestSavedJobs:
    """Tests for /api/users/{id}/saved-jobs"""

    def test_save_is_idempotent(self, client, job):
        client.post("/api/users/sync", json={"externalUserId": "user_1"})

        client.post("/api/users/user_1/saved-jobs", json={"jobId": job["_id"]})
        response = client.post("/api/users/user_1/saved-jobs", json={"jobId": job["_id"]})

        assert response.status_code == 200
        saved = response.json()["data"]
        assert len(saved) == 1
        assert saved[0]["jobId"] == job["_id"]
        assert saved[0]["job"]["title"] == job["title"]

    def test_unsave(self, client, job):
        client.post("/api/users/sync", json={"externalUserId": "user_1"})
        client.post("/api/users/user_1/saved-jobs", json={"jobId": job["_id"]})

        response = client.delete(f"/api/users/user_1/saved-jobs/{job['_id']}")

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert client.get("/api/users/user_1/saved-jobs").json()["data"] == []

    def test_save_unknown_job(self, client):
        client.post("/api/users/sync", json={"externalUserId": "user_1"})

        response = client.post("/api/users/user_1/saved-jobs", json={"jobId": str(ObjectId())})

        assert response.status_code == 404

    def test_save_for_unknown_user(self, client, job):
        response = client.post("/api/users/user_ghost/saved-jobs", json={"jobId": job["_id"]})

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"
