"""
FlowBoard Backend: Lead Service
===============================

What:  Trial signups, demo requests and the admin overview of both.
Who:   Called by the /api/signup/trial, /api/demo/request and
       /api/admin/leads routes; owns the lead store and a MailDispatcher.

Signup / demo flow:
    validate (400) → build record → append to lead store → one email → 200
    Any failure after validation → DispatchError with the endpoint's generic
    message. The lead stays in the store even when the email fails.

Trial window:
    The trial lead is built from a single clock reading; the stored endDate,
    the welcome email's "Trial End Date" and the response's trialEnd all come
    from that record.
"""

import logging
from typing import Optional

from flowboard.exceptions import DispatchError, ValidationError
from flowboard.models.lead import DEFAULT_DEMO_TIMEZONE, DemoLead, LeadRecord, TrialLead
from flowboard.schemas.site import SubmissionResponse
from flowboard.schemas.lead import (
    DemoRequest,
    LeadSummaryResponse,
    TrialSignupRequest,
    TrialSignupResponse,
)
from flowboard.services import email_templates
from flowboard.services.mail_base import MailDispatcher
from flowboard.services.store import RecordStore

logger = logging.getLogger(__name__)

RECENT_LEADS_LIMIT = 10


def _missing(request, fields) -> list:
    return [f for f in fields if not getattr(request, f)]


class LeadService:
    """
    Business logic for lead capture.

    Responsibilities:
        - create_trial(): open a 14-day trial and send the welcome email
        - request_demo(): record a demo request and confirm it
        - summarize():    counts and the most recent leads for the sales team
    """

    def __init__(self, store: RecordStore[LeadRecord], mailer: MailDispatcher):
        self.store = store
        self.mailer = mailer

    async def create_trial(self, request: TrialSignupRequest) -> TrialSignupResponse:
        """
        Raises:
            ValidationError: name or email missing.
            DispatchError:   "Failed to create trial account".
        """
        missing = _missing(request, ("name", "email"))
        if missing:
            raise ValidationError(message="Name and email are required", fields=missing)

        try:
            lead = self.store.append(
                TrialLead.starting(
                    name=request.name,
                    email=request.email,
                    company=request.company,
                    team_size=request.team_size,
                )
            )
            logger.info("Trial lead %s stored (ends %s)", lead.id, lead.end_date.isoformat())

            welcome = email_templates.trial_welcome(lead)
            await self.mailer.send(lead.email, welcome.subject, welcome.html)

        except Exception as e:
            logger.error("Error creating trial account: %s", str(e), exc_info=True)
            raise DispatchError(
                message="Failed to create trial account",
                context={"error_type": type(e).__name__},
            ) from e

        return TrialSignupResponse(
            message="Trial account created successfully",
            trial_end=lead.end_date,
        )

    async def request_demo(self, request: DemoRequest) -> SubmissionResponse:
        """
        Raises:
            ValidationError: name, email or preferredDate missing.
            DispatchError:   "Failed to submit demo request".
        """
        missing = _missing(request, ("name", "email", "preferred_date"))
        if missing:
            raise ValidationError(message="Required fields missing", fields=missing)

        try:
            lead = self.store.append(
                DemoLead(
                    name=request.name,
                    email=request.email,
                    company=request.company,
                    preferred_date=request.preferred_date,
                    timezone=request.timezone or DEFAULT_DEMO_TIMEZONE,
                )
            )
            logger.info("Demo request %s stored for %s", lead.id, lead.preferred_date)

            confirmation = email_templates.demo_confirmation(lead)
            await self.mailer.send(lead.email, confirmation.subject, confirmation.html)

        except Exception as e:
            logger.error("Error processing demo request: %s", str(e), exc_info=True)
            raise DispatchError(
                message="Failed to submit demo request",
                context={"error_type": type(e).__name__},
            ) from e

        return SubmissionResponse(message="Demo request submitted successfully")

    def summarize(self, limit: Optional[int] = RECENT_LEADS_LIMIT) -> LeadSummaryResponse:
        """Lead counts plus the last `limit` leads in insertion order. Read-only."""
        recent = self.store.slice(-limit) if limit else []
        return LeadSummaryResponse(
            total_leads=self.store.size(),
            trial_users=len(self.store.filter(lambda lead: getattr(lead, "plan", None) == "trial")),
            demo_requests=len(self.store.filter(lambda lead: lead.status == "pending")),
            recent_leads=recent,
        )
