"""
FlowBoard Backend: Contact Message Record
=========================================

What:  One contact-form submission as kept in the message store.
Who:   Created by ContactService.submit(); read by tests and email templates.

Status never moves past "new": there is no inbox workflow in this service.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from flowboard.models.base import RecordModel, next_record_id, utc_now

DEFAULT_CONTACT_COMPANY = "Not specified"


class ContactMessage(RecordModel):
    id: int = Field(default_factory=next_record_id)
    name: str
    email: str
    company: str = DEFAULT_CONTACT_COMPANY
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    status: Literal["new"] = "new"
