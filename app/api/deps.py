"""
FastAPI dependencies that hand each request its service, bound to the
database from get_mongo_db (overridden in tests).
"""

from fastapi import Depends
from pymongo.database import Database

from app.db.mongodb import get_mongo_db
from app.services.application_service import ApplicationService
from app.services.contact_service import ContactService
from app.services.job_service import JobService
from app.services.notification_service import NotificationService
from app.services.user_service import UserService


def get_notification_service() -> NotificationService:
    return NotificationService()


def get_application_service(db: Database = Depends(get_mongo_db)) -> ApplicationService:
    return ApplicationService(db)


def get_job_service(db: Database = Depends(get_mongo_db)) -> JobService:
    return JobService(db)


def get_user_service(db: Database = Depends(get_mongo_db)) -> UserService:
    return UserService(db)


def get_contact_service(
    db: Database = Depends(get_mongo_db),
    notifier: NotificationService = Depends(get_notification_service),
) -> ContactService:
    return ContactService(db, notifier)
