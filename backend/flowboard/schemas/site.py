"""
FlowBoard Backend: Site Schemas
===============================

What:  Response models shared across endpoints: stats, health, the
       submission acknowledgement and the error body.
"""

from datetime import datetime

from pydantic import Field

from flowboard.models.base import CamelModel


class StatsResponse(CamelModel):
    """Headline numbers shown on the landing page."""
    total_users: int
    projects_completed: int
    teams_using: int
    satisfaction_rate: float


class SubmissionResponse(CamelModel):
    """Success body shared by the contact, trial and demo endpoints."""
    success: bool = True
    message: str


class HealthResponse(CamelModel):
    status: str = Field(description="Always 'healthy' while the process serves requests")
    timestamp: datetime = Field(description="Server time (UTC ISO 8601)")
    version: str = Field(description="Application version")


class ErrorResponse(CamelModel):
    """
    What:  The only error shape the API returns.

    No codes, request ids or details: those go to the server log and the
    X-Request-ID response header.
    """
    error: str = Field(description="Human-readable error message")
