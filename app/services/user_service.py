"""
User Service - accounts keyed by the identity provider's user id.

ensure_user() is the one way a user record comes into existence: sign-in
sync and application submission both go through it, and calling it again
for the same identity returns the existing record untouched.
"""

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.schemas.schemas import UserSync, UserType
from app.services.job_service import JobService
from app.services.mongo_service import MongoService, serialize_doc, to_object_id, utcnow

logger = logging.getLogger(__name__)

PLACEHOLDER_EMAIL_DOMAIN = "jobhub.app"
PLACEHOLDER_FIRST_NAME = "Job"
PLACEHOLDER_LAST_NAME = "Seeker"

# Fields a user may carry into the public applicant snapshot
PUBLIC_PROFILE_FIELDS = ("externalUserId", "email", "firstName", "lastName", "profileImage")


def placeholder_email(external_user_id: str, suffix: Optional[str] = None) -> str:
    """
    user_2abc -> 2abc@jobhub.app

    With a suffix, user_2abc -> 2abc+<suffix>@jobhub.app. Lowercasing and
    prefix stripping mean two identities can share the plain form.
    """
    local_part = external_user_id.replace("user_", "", 1)
    if suffix:
        local_part = f"{local_part}+{suffix}"
    return f"{local_part}@{PLACEHOLDER_EMAIL_DOMAIN}".lower()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def full_name(user: dict) -> str:
    return " ".join(part for part in (user.get("firstName"), user.get("lastName")) if part)


def with_full_name(user: dict) -> dict:
    user = serialize_doc(user)
    user["fullName"] = full_name(user)
    return user


def public_profile(user: dict) -> dict:
    snapshot = {"_id": str(user["_id"])}
    for field in PUBLIC_PROFILE_FIELDS:
        snapshot[field] = user.get(field)
    snapshot["fullName"] = full_name(user)
    return snapshot


class UserService(MongoService):
    collection_name = "users"

    def get_by_external_id(self, external_user_id: str) -> Optional[dict]:
        return self.collection.find_one({"externalUserId": external_user_id})

    def get_user(self, external_user_id: str) -> dict:
        user = self.get_by_external_id(external_user_id)
        if user is None:
            raise NotFoundError("User not found")
        return with_full_name(user)

    def ensure_user(
        self,
        external_user_id: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image: Optional[str] = None,
        user_type: UserType = UserType.job_seeker,
    ) -> dict:
        """
        Return the user for this identity, creating it first if needed.

        Missing email/names fall back to placeholders derived from the
        identity. Existing users are never modified here. A placeholder
        email already held by another identity is made unique with the
        new record's id; a caller-supplied email that is taken is a
        ConflictError.
        """
        if not external_user_id or not external_user_id.strip():
            raise ValidationError("User ID is required")

        user = self.get_by_external_id(external_user_id)
        if user is not None:
            return user

        now = utcnow()
        doc = {
            "_id": ObjectId(),
            "externalUserId": external_user_id,
            "email": normalize_email(email) if email else placeholder_email(external_user_id),
            "firstName": first_name if first_name is not None else PLACEHOLDER_FIRST_NAME,
            "lastName": last_name if last_name is not None else PLACEHOLDER_LAST_NAME,
            "profileImage": profile_image,
            "userType": user_type.value,
            "isActive": True,
            "savedJobs": [],
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError:
            # Lost a race with another request creating the same identity
            user = self.get_by_external_id(external_user_id)
            if user is not None:
                return user
            if email:
                raise ConflictError("Email is already registered to another user")

            doc["_id"] = ObjectId()
            doc["email"] = placeholder_email(external_user_id, suffix=str(doc["_id"]))
            logger.info("Placeholder email taken, using %s for %s", doc["email"], external_user_id)
            try:
                self.collection.insert_one(doc)
            except DuplicateKeyError:
                user = self.get_by_external_id(external_user_id)
                if user is None:
                    raise
                return user

        logger.info("Created user %s (%s)", external_user_id, doc["email"])
        return doc

    def sync_user(self, data: UserSync) -> dict:
        """Sign-in sync: make sure the user exists, then apply the supplied profile fields."""
        user = self.ensure_user(
            data.external_user_id,
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            profile_image=data.profile_image,
            user_type=data.user_type or UserType.job_seeker,
        )

        updates = {}
        if data.email:
            updates["email"] = normalize_email(data.email)
        if data.first_name is not None:
            updates["firstName"] = data.first_name.strip()
        if data.last_name is not None:
            updates["lastName"] = data.last_name.strip()
        if data.profile_image is not None:
            updates["profileImage"] = data.profile_image
        if data.user_type is not None:
            updates["userType"] = data.user_type.value

        if updates:
            updates["updatedAt"] = utcnow()
            try:
                self.collection.update_one({"_id": user["_id"]}, {"$set": updates})
            except DuplicateKeyError:
                raise ConflictError("Email is already registered to another user")
            user = self.collection.find_one({"_id": user["_id"]})

        return with_full_name(user)

    # ============================================================
    # SAVED JOBS
    # ============================================================

    def save_job(self, external_user_id: str, job_id: Optional[str]) -> List[dict]:
        if not job_id:
            raise ValidationError("Job ID is required")
        user = self._require_user(external_user_id)
        job = JobService(self.db).get_job_document(job_id)

        # No-op when the job is already saved
        self.collection.update_one(
            {"_id": user["_id"], "savedJobs.jobId": {"$ne": job["_id"]}},
            {"$push": {"savedJobs": {"jobId": job["_id"], "savedAt": utcnow()}}},
        )
        return self.list_saved_jobs(external_user_id)

    def unsave_job(self, external_user_id: str, job_id: str) -> List[dict]:
        user = self._require_user(external_user_id)
        job_oid = to_object_id(job_id, "job ID")
        self.collection.update_one({"_id": user["_id"]}, {"$pull": {"savedJobs": {"jobId": job_oid}}})
        return self.list_saved_jobs(external_user_id)

    def list_saved_jobs(self, external_user_id: str) -> List[dict]:
        """Saved jobs, most recently saved first, with the job expanded (None if deleted)."""
        user = self._require_user(external_user_id)
        saved = sorted(user.get("savedJobs", []), key=lambda entry: entry["savedAt"], reverse=True)
        jobs = JobService(self.db).expand_jobs(entry["jobId"] for entry in saved)
        return [
            {"jobId": str(entry["jobId"]), "savedAt": entry["savedAt"], "job": jobs.get(entry["jobId"])}
            for entry in saved
        ]

    def _require_user(self, external_user_id: str) -> dict:
        user = self.get_by_external_id(external_user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
