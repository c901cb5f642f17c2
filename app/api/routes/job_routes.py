"""
Job Routes

POST /jobs - Create job posting
GET /jobs - List open jobs with filters
GET /jobs/{job_id} - Get job details
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_job_service
from app.core.responses import envelope
from app.schemas.schemas import JobCreate
from app.services.job_service import JobService
from app.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", status_code=201)
def create_job(job: JobCreate, service: JobService = Depends(get_job_service)):
    return envelope(data=service.create_job(job), message="Job created successfully")


@router.get("")
def list_jobs(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    search: Optional[str] = Query(None, description="Search in title"),
    company: Optional[str] = Query(None),
    service: JobService = Depends(get_job_service),
):
    """List active job postings, newest first."""
    jobs, pagination = service.list_jobs(page, limit, search=search, company=company)
    return envelope(data=jobs, pagination=pagination)


@router.get("/{job_id}")
def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    return envelope(data=service.get_job(job_id))
