"""
FlowBoard Backend: Contact Form Schemas
=======================================

What:  Request body for POST /api/contact.

Every request field is optional at the schema level. Presence is checked by
ContactService so a missing field produces the documented 400 body
(`{"error": "Missing required fields"}`) instead of FastAPI's 422.
"""

from typing import Optional

from pydantic import Field

from flowboard.models.base import CamelModel


class ContactRequest(CamelModel):
    """Body of POST /api/contact. Required: name, email, message."""
    name: Optional[str] = Field(default=None, description="Sender's name (required)")
    email: Optional[str] = Field(default=None, description="Sender's email (required)")
    company: Optional[str] = Field(default=None, description="Sender's company")
    message: Optional[str] = Field(default=None, description="Message text (required)")
