"""
MongoDB Service - shared plumbing for the collection services.

- MongoService: base class binding a service to one collection
- serialize_doc / serialize_docs: ObjectId -> str for JSON output
- to_object_id: parse a client-supplied id, rejecting malformed ones
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.exceptions import InvalidIdentifierError
from app.db.mongodb import get_collection, get_mongo_db


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _serialize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document (including nested references) to a JSON-serializable dict."""
    if doc is None:
        return None
    return _serialize_value(doc)


def serialize_docs(docs) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value: Any, label: str = "ID") -> ObjectId:
    """Parse an ObjectId, raising InvalidIdentifierError("Invalid <label>") when malformed."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(f"Invalid {label}")
    return ObjectId(value)


def utcnow() -> datetime:
    # Naive UTC, millisecond precision: what MongoDB hands back on read
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


# ============================================================
# BASE SERVICE
# ============================================================

class MongoService:
    """
    Binds a service to one collection of the given database.

    `db` defaults to the process-wide database; the API layer injects it
    so tests can swap in an in-memory one.
    """

    collection_name: str = ""

    def __init__(self, db: Optional[Database] = None):
        self.db: Database = db if db is not None else get_mongo_db()
        self.collection: Collection = get_collection(self.collection_name, self.db)
