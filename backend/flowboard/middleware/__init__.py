# Middleware package init
"""
FlowBoard Backend: Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the id; the id is
    echoed back in the X-Request-ID response header.
"""
