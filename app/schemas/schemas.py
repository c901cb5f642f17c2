"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Request bodies use camelCase keys on the wire (externalUserId, jobId, ...).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserType(str, Enum):
    job_seeker = "job_seeker"
    employer = "employer"
    admin = "admin"


class ApplicationStatus(str, Enum):
    applied = "applied"
    under_review = "under_review"
    interview = "interview"
    rejected = "rejected"
    accepted = "accepted"


class JobType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    internship = "internship"
    contract = "contract"
    remote = "remote"


class ContactCategory(str, Enum):
    general = "general"
    support = "support"
    feedback = "feedback"
    business = "business"
    technical = "technical"
    career = "career"
    other = "other"


class ContactStatus(str, Enum):
    new = "new"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class ContactPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class CamelModel(BaseModel):
    """Accepts camelCase keys from clients, snake_case from Python callers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# USER SCHEMAS
# ============================================================

class UserSync(CamelModel):
    external_user_id: str = Field(..., min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    profile_image: Optional[str] = None
    user_type: Optional[UserType] = None


class SavedJobCreate(CamelModel):
    job_id: Optional[str] = None


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: JobType = JobType.full_time
    category: Optional[str] = None


# ============================================================
# APPLICATION SCHEMAS
# Required fields are checked by the service so the client gets the
# endpoint-specific message instead of a generic validation error.
# ============================================================

class ApplicationCreate(CamelModel):
    external_user_id: Optional[str] = None
    job_id: Optional[str] = None
    cover_letter: Optional[str] = Field(None, max_length=1000)
    resume_url: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)


class ApplicationStatusUpdate(CamelModel):
    status: Optional[ApplicationStatus] = None
    external_user_id: Optional[str] = None


# ============================================================
# CONTACT SCHEMAS
# ============================================================

class ContactCreate(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = None
    subject: Optional[str] = Field(None, max_length=200)
    message: Optional[str] = Field(None, max_length=5000)
    category: ContactCategory = ContactCategory.general
    user_id: Optional[str] = None


class ContactReply(CamelModel):
    message: Optional[str] = None
    replied_by: Optional[str] = None


# ============================================================
# ENVELOPE SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[str]] = None
    error: Optional[str] = None
