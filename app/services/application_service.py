"""
Application Service - job applications.

Each application is its own document in `applications`:

    {userId, externalUserId, jobId, appliedAt, status,
     coverLetter, resumeUrl, notes, updatedAt}

The unique (userId, jobId) index makes "one application per user and
job" hold at the store, so two concurrent submits for the same pair
cannot both succeed.
"""

import logging
from typing import List, Optional, Tuple

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.schemas.schemas import ApplicationCreate, ApplicationStatus, ApplicationStatusUpdate
from app.services.job_service import JobService
from app.services.mongo_service import MongoService, serialize_doc, to_object_id, utcnow
from app.services.user_service import UserService, public_profile
from app.utils.pagination import build_pagination, empty_pagination, page_offset

logger = logging.getLogger(__name__)

DUPLICATE_APPLICATION_MESSAGE = "You have already applied for this job"


class ApplicationService(MongoService):
    collection_name = "applications"

    def __init__(self, db=None):
        super().__init__(db)
        self.users = UserService(self.db)
        self.jobs = JobService(self.db)

    def submit_application(self, data: ApplicationCreate) -> dict:
        """
        Apply a user to a job.

        1. job must exist (nothing is written otherwise)
        2. user is ensured, created with placeholder details if unknown
        3. a second application for the same job is a ConflictError
        4. the application is inserted with status "applied"

        Returns the application with `job` expanded.
        """
        external_user_id = (data.external_user_id or "").strip()
        if not external_user_id or not data.job_id:
            raise ValidationError("User ID and Job ID are required")

        job = self.jobs.get_job_document(data.job_id)
        user = self.users.ensure_user(external_user_id)

        if self.collection.find_one({"userId": user["_id"], "jobId": job["_id"]}, {"_id": 1}):
            raise ConflictError(DUPLICATE_APPLICATION_MESSAGE)

        now = utcnow()
        doc = {
            "userId": user["_id"],
            "externalUserId": external_user_id,
            "jobId": job["_id"],
            "appliedAt": now,
            "status": ApplicationStatus.applied.value,
            "coverLetter": data.cover_letter or "",
            "resumeUrl": data.resume_url or "",
            "notes": data.notes or "",
            "updatedAt": now,
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.warning("Concurrent duplicate application for user %s, job %s", external_user_id, job["_id"])
            raise ConflictError(DUPLICATE_APPLICATION_MESSAGE)
        doc["_id"] = result.inserted_id

        logger.info("User %s applied to job %s (application %s)", external_user_id, job["_id"], result.inserted_id)

        # Read-after-write so the job carries its updated applicationCount
        return self._with_job(doc, self.jobs.get_job(job["_id"]))

    def list_for_user(self, external_user_id: str, page: int, limit: int) -> Tuple[List[dict], dict]:
        """A user's applications, newest first. Unknown users get an empty page, not a 404."""
        user = self.users.get_by_external_id(external_user_id)
        if user is None:
            return [], empty_pagination("totalApplications")

        query = {"userId": user["_id"]}
        total = self.collection.count_documents(query)
        docs = list(
            self.collection.find(query)
            .sort("appliedAt", -1)
            .skip(page_offset(page, limit))
            .limit(limit)
        )
        jobs = self.jobs.expand_jobs(doc["jobId"] for doc in docs)
        applications = [self._with_job(doc, jobs.get(doc["jobId"])) for doc in docs]
        return applications, build_pagination(page, limit, len(applications), total, "totalApplications")

    def list_for_job(self, job_id: str, page: int, limit: int) -> Tuple[List[dict], dict, dict]:
        """
        Employer view: applicants to one job, newest first.

        Returns (applications, {title, company}, pagination). Each
        application carries a `user` snapshot of the applicant's public
        profile fields.
        """
        job = self.jobs.get_job_document(job_id)

        query = {"jobId": job["_id"]}
        total = self.collection.count_documents(query)
        docs = list(
            self.collection.find(query)
            .sort("appliedAt", -1)
            .skip(page_offset(page, limit))
            .limit(limit)
        )

        user_ids = list({doc["userId"] for doc in docs})
        users = {user["_id"]: user for user in self.users.collection.find({"_id": {"$in": user_ids}})} if user_ids else {}

        applications = []
        for doc in docs:
            application = serialize_doc(doc)
            user = users.get(doc["userId"])
            application["user"] = public_profile(user) if user else None
            applications.append(application)

        job_summary = {"title": job.get("title"), "company": job.get("company")}
        return applications, job_summary, build_pagination(page, limit, len(applications), total, "totalApplications")

    def update_status(self, application_id: str, data: ApplicationStatusUpdate) -> dict:
        """Set an application's status. The identity must own the application."""
        if data.status is None or not data.external_user_id:
            raise ValidationError("Status and User ID are required")

        application_oid = to_object_id(application_id, "application ID")
        user = self.users.get_by_external_id(data.external_user_id)
        if user is None:
            raise NotFoundError("Application not found")

        updated = self.collection.find_one_and_update(
            {"_id": application_oid, "userId": user["_id"]},
            {"$set": {"status": data.status.value, "updatedAt": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise NotFoundError("Application not found")

        logger.info("Application %s status -> %s", application_id, data.status.value)
        return serialize_doc(updated)

    @staticmethod
    def _with_job(doc: dict, job: Optional[dict]) -> dict:
        application = serialize_doc(doc)
        application["job"] = job
        return application
