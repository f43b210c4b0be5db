"""
FlowBoard Backend: Request ID Middleware
========================================

What:  Tags every request with a short id and returns it in X-Request-ID.
How:   Uses the caller's X-Request-ID header when present, otherwise the first
       8 characters of a UUID4. The id is stored in a ContextVar so any log
       line written while handling the request can include it.

Error bodies stay `{"error": ...}`; the header is how a support ticket is
matched to the server log.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, exposes it via request.state and the response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
