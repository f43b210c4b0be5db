"""
FlowBoard Backend: Lead Routes
==============================

What:  Trial signup, demo requests and the admin lead overview.
How:   Thin wrappers around LeadService.

Responses:
    POST /api/signup/trial
        200 {"success": true, "message": "Trial account created successfully", "trialEnd": ...}
        400 {"error": "Name and email are required"}
        500 {"error": "Failed to create trial account"}
    POST /api/demo/request
        200 {"success": true, "message": "Demo request submitted successfully"}
        400 {"error": "Required fields missing"}
        500 {"error": "Failed to submit demo request"}
    GET /api/admin/leads
        200 {"totalLeads", "trialUsers", "demoRequests", "recentLeads"}

The admin endpoint has no authentication. Put it behind an authenticating
proxy before exposing the service publicly.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from flowboard.dependencies import get_lead_service
from flowboard.schemas.lead import (
    DemoRequest,
    LeadSummaryResponse,
    TrialSignupRequest,
    TrialSignupResponse,
)
from flowboard.schemas.site import ErrorResponse, SubmissionResponse
from flowboard.services.lead_service import LeadService

router = APIRouter(prefix="/api", tags=["Leads"])

_ERROR_RESPONSES = {
    400: {"description": "Required field missing", "model": ErrorResponse},
    500: {"description": "Lead stored but email failed", "model": ErrorResponse},
}


@router.post(
    "/signup/trial",
    response_model=TrialSignupResponse,
    responses=_ERROR_RESPONSES,
    summary="Start a 14-day free trial",
)
async def signup_trial(
    payload: Optional[TrialSignupRequest] = None,
    service: LeadService = Depends(get_lead_service),
) -> TrialSignupResponse:
    return await service.create_trial(payload or TrialSignupRequest())


@router.post(
    "/demo/request",
    response_model=SubmissionResponse,
    responses=_ERROR_RESPONSES,
    summary="Request a product demo",
)
async def request_demo(
    payload: Optional[DemoRequest] = None,
    service: LeadService = Depends(get_lead_service),
) -> SubmissionResponse:
    return await service.request_demo(payload or DemoRequest())


@router.get(
    "/admin/leads",
    response_model=LeadSummaryResponse,
    # Demo leads without a company omit the key rather than sending null.
    response_model_exclude_none=True,
    summary="Lead counts and the 10 most recent leads",
)
async def admin_leads(service: LeadService = Depends(get_lead_service)) -> LeadSummaryResponse:
    return service.summarize()
