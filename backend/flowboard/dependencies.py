"""
FlowBoard Backend: FastAPI Dependencies
=======================================

What:  Hands route handlers the services and stores built by create_app().
How:   Everything lives on `app.state`; these functions read it per request.
       Tests swap implementations by passing fakes to create_app() or via
       `app.dependency_overrides`.
"""

from fastapi import Request

from flowboard.services.contact_service import ContactService
from flowboard.services.lead_service import LeadService


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_lead_service(request: Request) -> LeadService:
    return request.app.state.lead_service
