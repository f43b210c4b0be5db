"""
FlowBoard Marketing Backend: Application Package
================================================

What: The API behind the FlowBoard marketing site: contact form, trial signup,
      demo requests, a lead overview for the sales team, stats and health.
Who:  Imported by uvicorn (``flowboard.main:app``), the ``flowboard`` console
      script and the test suite.

Layering:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, store, email
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← stored records + API contracts
    ├─────────────────────────────────────┤
    │   Record stores / Mail dispatcher   │  ← in-memory lists, SMTP relay
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
