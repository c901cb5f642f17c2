"""
Application Routes

POST /applications - Apply to a job (creates the user on first apply)
GET /applications/user/{external_user_id} - A user's applications
GET /applications/job/{job_id} - Applicants to a job (employer view)
PUT /applications/{application_id}/status - Update application status
"""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_application_service
from app.core.responses import envelope
from app.schemas.schemas import ApplicationCreate, ApplicationStatusUpdate
from app.services.application_service import ApplicationService
from app.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", status_code=201)
def submit_application(
    application: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
):
    """Apply to a job. One application per user and job."""
    data = service.submit_application(application)
    return envelope(data=data, message="Application submitted successfully!")


@router.get("/user/{external_user_id}")
def get_user_applications(
    external_user_id: str,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: ApplicationService = Depends(get_application_service),
):
    """List a user's applications, newest first. Unknown users get an empty list."""
    applications, pagination = service.list_for_user(external_user_id, page, limit)
    return envelope(data=applications, pagination=pagination)


@router.get("/job/{job_id}")
def get_job_applications(
    job_id: str,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: ApplicationService = Depends(get_application_service),
):
    """List applicants to a job with their public profile."""
    applications, job, pagination = service.list_for_job(job_id, page, limit)
    return envelope(data=applications, job=job, pagination=pagination)


@router.put("/{application_id}/status")
def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    """Update status of an application owned by the given user."""
    data = service.update_status(application_id, update)
    return envelope(data=data, message="Application status updated successfully")
