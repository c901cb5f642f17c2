"""
Contact Routes

POST /contact - Submit contact form
GET /contact/stats - Inquiry counts by status, category and priority
GET /contact/user/{user_id} - A user's inquiries
POST /contact/{contact_id}/response - Reply to an inquiry and resolve it
"""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_contact_service
from app.core.responses import envelope
from app.schemas.schemas import ContactCreate, ContactReply
from app.services.contact_service import ContactService
from app.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", status_code=201)
def submit_contact(contact: ContactCreate, service: ContactService = Depends(get_contact_service)):
    data = service.submit(contact)
    return envelope(data=data, message="Thank you for contacting us! We'll get back to you soon.")


@router.get("/stats")
def get_contact_stats(service: ContactService = Depends(get_contact_service)):
    return envelope(data=service.stats())


@router.get("/user/{user_id}")
def get_user_contacts(
    user_id: str,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: ContactService = Depends(get_contact_service),
):
    contacts, pagination = service.list_for_user(user_id, page, limit)
    return envelope(data=contacts, pagination=pagination)


@router.post("/{contact_id}/response")
def respond_to_contact(
    contact_id: str,
    reply: ContactReply,
    service: ContactService = Depends(get_contact_service),
):
    """Attach a response and mark the inquiry resolved."""
    data = service.respond(contact_id, reply)
    return envelope(data=data, message="Response sent successfully")
