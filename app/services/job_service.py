"""
Job Service - job postings.

applicationCount is not stored on the job: every read counts the
documents in `applications` that reference it (indexed on jobId), so the
figure always matches the applications that actually exist.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from bson import ObjectId

from app.core.exceptions import NotFoundError
from app.db.mongodb import get_collection
from app.schemas.schemas import JobCreate
from app.services.mongo_service import MongoService, serialize_doc, to_object_id, utcnow
from app.utils.pagination import build_pagination, page_offset

logger = logging.getLogger(__name__)


class JobService(MongoService):
    collection_name = "jobs"

    def __init__(self, db=None):
        super().__init__(db)
        self.applications = get_collection("applications", self.db)

    def create_job(self, data: JobCreate) -> dict:
        now = utcnow()
        doc = {
            "title": data.title.strip(),
            "company": data.company.strip(),
            "description": data.description,
            "location": data.location,
            "jobType": data.job_type.value,
            "category": data.category,
            "isActive": True,
            "createdAt": now,
            "updatedAt": now,
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created job %s (%s at %s)", result.inserted_id, doc["title"], doc["company"])
        return self._present(doc, application_count=0)

    def get_job_document(self, job_id) -> dict:
        """Raw job document. Raises InvalidIdentifierError or NotFoundError."""
        oid = to_object_id(job_id, "job ID")
        doc = self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFoundError("Job not found")
        return doc

    def get_job(self, job_id) -> dict:
        return self._present(self.get_job_document(job_id))

    def list_jobs(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        company: Optional[str] = None,
    ) -> Tuple[List[dict], dict]:
        """Active jobs, newest first."""
        query: dict = {"isActive": True}
        if search:
            query["title"] = {"$regex": re.escape(search), "$options": "i"}
        if company:
            query["company"] = {"$regex": re.escape(company), "$options": "i"}

        total = self.collection.count_documents(query)
        cursor = (
            self.collection.find(query)
            .sort("createdAt", -1)
            .skip(page_offset(page, limit))
            .limit(limit)
        )
        jobs = [self._present(doc) for doc in cursor]
        return jobs, build_pagination(page, limit, len(jobs), total, "totalJobs")

    def application_count(self, job_oid: ObjectId) -> int:
        return self.applications.count_documents({"jobId": job_oid})

    def expand_jobs(self, job_oids: Iterable[ObjectId]) -> Dict[ObjectId, dict]:
        """Fetch several jobs at once, keyed by _id. Missing jobs are simply absent."""
        ids = list(set(job_oids))
        if not ids:
            return {}
        return {doc["_id"]: self._present(doc) for doc in self.collection.find({"_id": {"$in": ids}})}

    def _present(self, doc: dict, application_count: Optional[int] = None) -> dict:
        if application_count is None:
            application_count = self.application_count(doc["_id"])
        presented = serialize_doc(doc)
        presented["applicationCount"] = application_count
        return presented
