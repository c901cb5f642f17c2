"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory MongoDB (mongomock) with the production indexes
- FastAPI test client wired to that database
- A notification service that records instead of sending email
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_notification_service
from app.db.mongodb import get_mongo_db, init_mongo_indexes
from app.main import app
from app.schemas.schemas import JobCreate
from app.services.job_service import JobService


class RecordingNotifier:
    """Stands in for NotificationService; remembers what would have been sent."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.confirmations = []
        self.responses = []

    def send_contact_confirmation(self, contact):
        if self.fail:
            raise ConnectionError("SMTP server unreachable")
        self.confirmations.append(contact)
        return True

    def send_contact_response(self, contact, response_message):
        if self.fail:
            raise ConnectionError("SMTP server unreachable")
        self.responses.append((contact, response_message))
        return True


@pytest.fixture
def mongo_db():
    """Fresh in-memory database per test, indexed like production."""
    db = mongomock.MongoClient()["jobhub_test"]
    init_mongo_indexes(db)
    return db


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return RecordingNotifier(fail=True)


@pytest.fixture
def client(mongo_db, notifier):
    """
    FastAPI test client with the database and notifier overridden.
    Lifespan is not entered, so no real MongoDB connection is attempted.
    """
    app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    app.dependency_overrides[get_notification_service] = lambda: notifier

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_job(mongo_db):
    """Create a job directly through the service and return it (with string _id)."""
    service = JobService(mongo_db)

    def _make_job(title="Senior Python Developer", company="Acme Corp", **fields):
        return service.create_job(JobCreate(title=title, company=company, **fields))

    return _make_job


@pytest.fixture
def job(make_job):
    return make_job()


@pytest.fixture
def sample_contact_data():
    return {
        "name": "Jane Doe",
        "email": "  Jane.Doe@Example.com ",
        "subject": "Trouble uploading my resume",
        "message": "The upload button does nothing when I pick a PDF.",
        "category": "support",
        "userId": "user_jane",
    }
