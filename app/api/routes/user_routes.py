"""
User Routes

POST /users/sync - Create or update a user from identity-provider sign-in
GET /users/{external_user_id} - Get user
GET /users/{external_user_id}/saved-jobs - Saved jobs
POST /users/{external_user_id}/saved-jobs - Save a job
DELETE /users/{external_user_id}/saved-jobs/{job_id} - Unsave a job
"""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_user_service
from app.core.responses import envelope
from app.schemas.schemas import SavedJobCreate, UserSync
from app.services.user_service import UserService
from app.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, paginate

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/sync")
def sync_user(data: UserSync, service: UserService = Depends(get_user_service)):
    """Idempotent: creates the user on first sign-in, updates profile fields after."""
    return envelope(data=service.sync_user(data), message="User synced successfully")


@router.get("/{external_user_id}")
def get_user(external_user_id: str, service: UserService = Depends(get_user_service)):
    return envelope(data=service.get_user(external_user_id))


@router.get("/{external_user_id}/saved-jobs")
def get_saved_jobs(
    external_user_id: str,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: UserService = Depends(get_user_service),
):
    """Saved jobs, most recently saved first."""
    saved, pagination = paginate(service.list_saved_jobs(external_user_id), page, limit, "totalSavedJobs")
    return envelope(data=saved, pagination=pagination)


@router.post("/{external_user_id}/saved-jobs")
def save_job(external_user_id: str, data: SavedJobCreate, service: UserService = Depends(get_user_service)):
    saved = service.save_job(external_user_id, data.job_id)
    return envelope(data=saved, message="Job saved")


@router.delete("/{external_user_id}/saved-jobs/{job_id}")
def unsave_job(external_user_id: str, job_id: str, service: UserService = Depends(get_user_service)):
    saved = service.unsave_job(external_user_id, job_id)
    return envelope(data=saved, message="Job removed from saved jobs")
