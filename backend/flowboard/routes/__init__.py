# Routes package init
"""
FlowBoard Backend: API Routes Package
=====================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles one area of the marketing site.

Route Inventory:
    - site.py:     GET  /api/stats            (landing-page numbers)
    - contact.py:  POST /api/contact          (contact form)
    - leads.py:    POST /api/signup/trial     (14-day trial signup)
                   POST /api/demo/request     (demo request)
                   GET  /api/admin/leads      (lead overview, unauthenticated)
    - health.py:   GET  /api/health           (liveness probe)
    - spa.py:      GET  /{anything else}      (static assets / index.html)

Routes stay thin: parse the body, call the service, return its result.
Errors are raised as FlowBoardError subclasses and formatted by the global
handlers in main.py.
"""
