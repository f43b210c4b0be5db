"""
FlowBoard Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the two failure kinds a request can hit.
How:   Each exception carries a caller-safe message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       `{"error": message}` JSON bodies with the matching status code.
Who:   Raised by services and the mail dispatcher; caught by global handlers.

Exception Hierarchy:
    FlowBoardError (base)
    ├── ValidationError     → 400 Bad Request (missing required field)
    ├── DispatchError       → 500 Internal Server Error (store or email step failed)
    └── MailDeliveryError   → raised by the SMTP dispatcher, translated by
                              services into the endpoint's DispatchError

The response body never carries the context, an error code or a stack trace.
Context is for the server log only.
"""

from typing import Any, Dict, Optional


class FlowBoardError(Exception):
    """
    Base exception for all FlowBoard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FlowBoardError):
    """
    Raised when a submission is missing a required field.

    HTTP:    400 Bad Request
    When:    Before any store mutation or email dispatch; a request that fails
             validation has no side effects.

    Example response:
        {"error": "Name and email are required"}
    """

    def __init__(
        self,
        message: str = "Missing required fields",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["missing_fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.fields = list(fields or [])


class DispatchError(FlowBoardError):
    """
    Raised when a submission was accepted but a downstream step failed.

    HTTP:    500 Internal Server Error
    When:    Appending to a store or sending an email raised. The message is
             the endpoint's generic failure text ("Failed to send message", ...).

    A record appended before the failure stays in its store; the caller is
    told the whole operation failed.
    """

    def __init__(
        self,
        message: str = "Request could not be completed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MailDeliveryError(FlowBoardError):
    """
    Raised by a MailDispatcher when the relay refuses or cannot be reached.

    Never reaches the HTTP layer directly: services catch it and raise the
    endpoint's DispatchError instead.
    """

    def __init__(
        self,
        message: str = "Email delivery failed",
        recipient: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if recipient:
            ctx["recipient"] = recipient
        super().__init__(message=message, context=ctx)
        self.recipient = recipient
