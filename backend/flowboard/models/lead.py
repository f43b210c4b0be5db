"""
FlowBoard Backend: Lead Records
===============================

What:  The two kinds of lead kept in the lead store.
Who:   Created by LeadService; summarized by the admin leads endpoint.

    TrialLead   plan="trial",       status="active"   (POST /api/signup/trial)
    DemoLead    preferredDate=...,  status="pending"  (POST /api/demo/request)

Both live in the same store. The admin summary tells them apart the same
way the sales dashboard always has: trial users by `plan == "trial"`,
demo requests by `status == "pending"`.
"""

from datetime import datetime, timedelta
from typing import Literal, Optional, Union

from pydantic import Field, model_validator

from flowboard.models.base import RecordModel, next_record_id, utc_now

TRIAL_LENGTH = timedelta(days=14)
DEFAULT_TRIAL_COMPANY = "Personal"
DEFAULT_TEAM_SIZE = "1-5"
DEFAULT_DEMO_TIMEZONE = "UTC"


class TrialLead(RecordModel):
    """
    A 14-day trial signup.

    `end_date` is always exactly TRIAL_LENGTH after `start_date`. Build trial
    leads with TrialLead.starting() so both come from a single clock reading;
    the welcome email and the API response read the end date from the record.
    """

    id: int = Field(default_factory=next_record_id)
    name: str
    email: str
    company: str = DEFAULT_TRIAL_COMPANY
    team_size: str = DEFAULT_TEAM_SIZE
    plan: Literal["trial"] = "trial"
    start_date: datetime
    end_date: datetime
    status: Literal["active"] = "active"

    @model_validator(mode="after")
    def _check_trial_window(self) -> "TrialLead":
        if self.end_date - self.start_date != TRIAL_LENGTH:
            raise ValueError("end_date must be exactly 14 days after start_date")
        return self

    @classmethod
    def starting(
        cls,
        name: str,
        email: str,
        company: Optional[str] = None,
        team_size: Optional[str] = None,
        start: Optional[datetime] = None,
    ) -> "TrialLead":
        """Open a trial now (or at `start`), applying the signup defaults."""
        start = start or utc_now()
        return cls(
            name=name,
            email=email,
            company=company or DEFAULT_TRIAL_COMPANY,
            team_size=team_size or DEFAULT_TEAM_SIZE,
            start_date=start,
            end_date=start + TRIAL_LENGTH,
        )


class DemoLead(RecordModel):
    """A request for a guided demo at a caller-chosen date (stored verbatim)."""

    id: int = Field(default_factory=next_record_id)
    name: str
    email: str
    company: Optional[str] = None
    preferred_date: str
    timezone: str = DEFAULT_DEMO_TIMEZONE
    status: Literal["pending"] = "pending"
    created_at: datetime = Field(default_factory=utc_now)


LeadRecord = Union[TrialLead, DemoLead]
