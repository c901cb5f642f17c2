"""
Contact Service - contact-form inquiries.

Lifecycle: new -> resolved (via respond). Responding again overwrites
the stored response; nothing moves an inquiry back to "new".
Notification emails are best-effort: a failed send is logged and the
request still succeeds.
"""

import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from pymongo import ReturnDocument

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.schemas import ContactCreate, ContactPriority, ContactReply, ContactStatus
from app.services.mongo_service import MongoService, serialize_doc, serialize_docs, to_object_id, utcnow
from app.services.notification_service import NotificationService
from app.utils.pagination import build_pagination, page_offset

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def submitted_label(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Human-readable age of an inquiry: 'Just now', '5 hours ago', '1 day ago', '3 days ago'."""
    now = now or utcnow()
    hours = int((now - created_at).total_seconds() // 3600)
    days = hours // 24

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours} hours ago"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


class ContactService(MongoService):
    collection_name = "contacts"

    def __init__(self, db=None, notifier: Optional[NotificationService] = None):
        super().__init__(db)
        self.notifier = notifier or NotificationService()

    def submit(self, data: ContactCreate) -> dict:
        fields = {name: (getattr(data, name) or "").strip() for name in ("name", "email", "subject", "message")}
        if not all(fields.values()):
            raise ValidationError("All required fields must be provided")

        email = fields["email"].lower()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Validation error", errors=["Please enter a valid email"])

        now = utcnow()
        doc = {
            "name": fields["name"],
            "email": email,
            "subject": fields["subject"],
            "message": fields["message"],
            "category": data.category.value,
            "userId": data.user_id or None,
            "status": ContactStatus.new.value,
            "priority": ContactPriority.medium.value,
            "assignedTo": None,
            "attachments": [],
            "createdAt": now,
            "updatedAt": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Contact inquiry %s received from %s", result.inserted_id, email)

        self._notify(self.notifier.send_contact_confirmation, doc)

        return {
            "id": str(doc["_id"]),
            "name": doc["name"],
            "email": doc["email"],
            "subject": doc["subject"],
            "submittedDate": submitted_label(doc["createdAt"], now),
        }

    def stats(self) -> dict:
        return {
            "totalContacts": self.collection.count_documents({}),
            "newContacts": self.collection.count_documents({"status": ContactStatus.new.value}),
            "resolvedContacts": self.collection.count_documents({"status": ContactStatus.resolved.value}),
            "categories": self._count_by("category"),
            "priorities": self._count_by("priority"),
            "statuses": self._count_by("status"),
        }

    def list_for_user(self, user_id: str, page: int, limit: int) -> Tuple[List[dict], dict]:
        query = {"userId": user_id}
        total = self.collection.count_documents(query)
        cursor = (
            self.collection.find(query)
            .sort("createdAt", -1)
            .skip(page_offset(page, limit))
            .limit(limit)
        )
        contacts = serialize_docs(cursor)
        return contacts, build_pagination(page, limit, len(contacts), total, "totalContacts")

    def respond(self, contact_id: str, data: ContactReply) -> dict:
        """Attach a reply and mark the inquiry resolved. Repeat calls overwrite the reply."""
        message = (data.message or "").strip()
        replied_by = (data.replied_by or "").strip()
        if not message or not replied_by:
            raise ValidationError("Response message and replier info are required")

        oid = to_object_id(contact_id, "contact ID")
        now = utcnow()
        contact = self.collection.find_one_and_update(
            {"_id": oid},
            {
                "$set": {
                    "status": ContactStatus.resolved.value,
                    "response": {"message": message, "repliedAt": now, "repliedBy": replied_by},
                    "updatedAt": now,
                }
            },
            return_document=ReturnDocument.AFTER,
        )
        if contact is None:
            raise NotFoundError("Contact inquiry not found")

        logger.info("Contact inquiry %s resolved by %s", contact_id, replied_by)
        self._notify(self.notifier.send_contact_response, contact, message)
        return serialize_doc(contact)

    def _count_by(self, field: str) -> List[dict]:
        pipeline = [
            {"$group": {"_id": f"${field}", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
        ]
        return list(self.collection.aggregate(pipeline))

    @staticmethod
    def _notify(send, *args) -> None:
        try:
            send(*args)
        except Exception:
            logger.exception("Notification %s failed", getattr(send, "__name__", send))
