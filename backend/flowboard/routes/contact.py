"""
FlowBoard Backend: Contact Route
================================

What:  POST /api/contact, the marketing site's contact form.
How:   Delegates to ContactService; a missing body counts as an empty form.

Responses:
    200 {"success": true, "message": "Message sent successfully"}
    400 {"error": "Missing required fields"}
    500 {"error": "Failed to send message"}
"""

from typing import Optional

from fastapi import APIRouter, Depends

from flowboard.dependencies import get_contact_service
from flowboard.schemas.contact import ContactRequest
from flowboard.schemas.site import ErrorResponse, SubmissionResponse
from flowboard.services.contact_service import ContactService

router = APIRouter(prefix="/api", tags=["Contact"])


@router.post(
    "/contact",
    response_model=SubmissionResponse,
    responses={
        400: {"description": "Required field missing", "model": ErrorResponse},
        500: {"description": "Message stored but email failed", "model": ErrorResponse},
    },
    summary="Submit the contact form",
)
async def submit_contact(
    payload: Optional[ContactRequest] = None,
    service: ContactService = Depends(get_contact_service),
) -> SubmissionResponse:
    return await service.submit(payload or ContactRequest())
