"""
FlowBoard Backend: Lead Schemas
===============================

What:  Request/response contracts for trial signup, demo requests and the
       admin lead summary.

As with the contact form, request fields are all optional here and checked
for presence by LeadService.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from flowboard.models.base import CamelModel
from flowboard.models.lead import LeadRecord
from flowboard.schemas.site import SubmissionResponse


class TrialSignupRequest(CamelModel):
    """Body of POST /api/signup/trial. Required: name, email."""
    name: Optional[str] = Field(default=None, description="Account owner's name (required)")
    email: Optional[str] = Field(default=None, description="Login email (required)")
    company: Optional[str] = Field(default=None, description="Company (defaults to 'Personal')")
    team_size: Optional[str] = Field(default=None, description="Team size bucket (defaults to '1-5')")


class TrialSignupResponse(SubmissionResponse):
    trial_end: datetime = Field(description="When the 14-day trial ends (UTC ISO 8601)")


class DemoRequest(CamelModel):
    """Body of POST /api/demo/request. Required: name, email, preferredDate."""
    name: Optional[str] = Field(default=None, description="Requester's name (required)")
    email: Optional[str] = Field(default=None, description="Requester's email (required)")
    company: Optional[str] = Field(default=None, description="Requester's company")
    preferred_date: Optional[str] = Field(
        default=None,
        description="Preferred demo date/time as entered by the visitor (required)",
    )
    timezone: Optional[str] = Field(default=None, description="Visitor's timezone (defaults to 'UTC')")


class LeadSummaryResponse(CamelModel):
    """
    What:  Sales-team overview of the lead store.
    Who:   Returned by GET /api/admin/leads.

    recent_leads holds at most the last 10 leads, oldest first.
    """
    total_leads: int
    trial_users: int
    demo_requests: int
    recent_leads: List[LeadRecord]
