"""
MongoDB Connection Utility

Collections:
- users: accounts synced from the identity provider, plus saved jobs
- jobs: job postings
- applications: one document per (user, job) application
- contacts: contact-form inquiries
"""
import logging
from typing import Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "applications": "applications",
    "contacts": "contacts",
}


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
    return _client


def get_mongo_db() -> Database:
    """Get the application database. Also used as a FastAPI dependency."""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str, db: Optional[Database] = None) -> Collection:
    """Get a collection by its key in COLLECTIONS."""
    if db is None:
        db = get_mongo_db()
    return db[COLLECTIONS[name]]


def close_mongo_client() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Optional[Database] = None) -> None:
    """
    Create indexes. Call once during app startup.

    The unique (userId, jobId) index on applications is what guarantees
    one application per user and job, including under concurrent submits.
    """
    if db is None:
        db = get_mongo_db()

    users = db[COLLECTIONS["users"]]
    users.create_index("externalUserId", unique=True)
    users.create_index("email", unique=True)
    users.create_index([("email", ASCENDING), ("userType", ASCENDING)])

    jobs = db[COLLECTIONS["jobs"]]
    jobs.create_index([("isActive", ASCENDING), ("createdAt", DESCENDING)])

    applications = db[COLLECTIONS["applications"]]
    applications.create_index([("userId", ASCENDING), ("jobId", ASCENDING)], unique=True)
    applications.create_index([("jobId", ASCENDING), ("appliedAt", DESCENDING)])
    applications.create_index([("userId", ASCENDING), ("appliedAt", DESCENDING)])

    contacts = db[COLLECTIONS["contacts"]]
    contacts.create_index([("email", ASCENDING), ("status", ASCENDING), ("createdAt", DESCENDING)])
    contacts.create_index([("category", ASCENDING), ("priority", ASCENDING)])
    contacts.create_index([("userId", ASCENDING), ("createdAt", DESCENDING)])

    logger.info("MongoDB indexes created successfully")
