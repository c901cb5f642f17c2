"""
Schemas module - Request/Response schemas for API endpoints.
"""

from app.schemas.schemas import (
    ApplicationCreate,
    ApplicationStatus,
    ApplicationStatusUpdate,
    ContactCategory,
    ContactCreate,
    ContactPriority,
    ContactReply,
    ContactStatus,
    ErrorResponse,
    JobCreate,
    JobType,
    SavedJobCreate,
    UserSync,
    UserType,
)

__all__ = [
    "ApplicationCreate",
    "ApplicationStatus",
    "ApplicationStatusUpdate",
    "ContactCategory",
    "ContactCreate",
    "ContactPriority",
    "ContactReply",
    "ContactStatus",
    "ErrorResponse",
    "JobCreate",
    "JobType",
    "SavedJobCreate",
    "UserSync",
    "UserType",
]
