"""
FlowBoard Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the stores, the mail dispatcher and the services,
       registers middleware, exception handlers and routes, and returns the app.
Who:   uvicorn (`uvicorn flowboard.main:app`), the `flowboard` console script
       and the tests (which pass fakes into create_app()).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:                                            │
    │   /api/stats  /api/contact  /api/signup/trial       │
    │   /api/demo/request  /api/admin/leads  /api/health  │
    │   /{anything else} → static file or index.html      │
    │                                                     │
    │  app.state:                                         │
    │   lead_store, message_store, mailer,                │
    │   contact_service, lead_service                     │
    │                                                     │
    │  Exception Handlers:                                │
    │   ValidationError→400  DispatchError→500            │
    │   bad body→400         anything else→500            │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flowboard import __version__
from flowboard.config import settings
from flowboard.exceptions import DispatchError, FlowBoardError, ValidationError
from flowboard.middleware.logging import RequestLoggingMiddleware
from flowboard.middleware.request_id import RequestIDMiddleware, request_id_var
from flowboard.models.contact import ContactMessage
from flowboard.models.lead import LeadRecord
from flowboard.routes import contact, health, leads, site, spa
from flowboard.services.contact_service import ContactService
from flowboard.services.lead_service import LeadService
from flowboard.services.mail_base import MailDispatcher
from flowboard.services.smtp_service import build_mail_dispatcher
from flowboard.services.store import InMemoryRecordStore, RecordStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by Docker / the process manager).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # flowboard.access already logs every request with duration and request id.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report risky configuration.
    Shutdown: report how many records are about to be lost; the stores live
    in memory only.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("FlowBoard backend %s starting up...", __version__)

    for warning in settings.configuration_warnings():
        logger.warning("Configuration: %s", warning)

    logger.info("Server running on port %d", settings.port)
    logger.info("API endpoints available at http://localhost:%d/api/", settings.port)
    logger.info("=" * 60)

    yield

    logger.info(
        "FlowBoard backend shutting down (%d leads, %d contact messages discarded)",
        app.state.lead_store.size(),
        app.state.message_store.size(),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the API's single error shape, `{"error": message}`.

        ValidationError        → 400, endpoint-specific message
        RequestValidationError → 400, "Invalid request body" (malformed JSON / wrong types)
        HTTPException          → its own status, its detail (404, 405, ...)
        DispatchError          → 500, endpoint-specific message
        FlowBoardError (base)  → 500, its message
        Exception (fallback)   → 500, "Internal server error"

    Context and stack traces are logged here, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request body on %s: %s", rid, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DispatchError)
    async def handle_dispatch_error(request: Request, exc: DispatchError):
        rid = request_id_var.get("")
        logger.error("[%s] Dispatch error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(FlowBoardError)
    async def handle_app_error(request: Request, exc: FlowBoardError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    lead_store: Optional[RecordStore[LeadRecord]] = None,
    message_store: Optional[RecordStore[ContactMessage]] = None,
    mailer: Optional[MailDispatcher] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        lead_store:    Store for trial and demo leads (default: fresh in-memory store).
        message_store: Store for contact messages (default: fresh in-memory store).
        mailer:        Mail dispatcher (default: SMTP relay from settings).

    Returns:
        Fully configured FastAPI instance. Each call gets its own stores, so
        two apps never share records.
    """
    app = FastAPI(
        title="FlowBoard API",
        description=(
            "Backend for the FlowBoard marketing site: contact form, trial signup, "
            "demo requests and a lead overview for the sales team."
        ),
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # ── Wire stores, dispatcher and services ──────────────────────────────
    app.state.lead_store = lead_store if lead_store is not None else InMemoryRecordStore("leads")
    app.state.message_store = (
        message_store if message_store is not None else InMemoryRecordStore("contact_messages")
    )
    app.state.mailer = mailer if mailer is not None else build_mail_dispatcher(settings)
    app.state.contact_service = ContactService(
        store=app.state.message_store,
        mailer=app.state.mailer,
        notification_email=settings.notification_email,
    )
    app.state.lead_service = LeadService(store=app.state.lead_store, mailer=app.state.mailer)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(site.router)
    app.include_router(contact.router)
    app.include_router(leads.router)
    app.include_router(health.router)
    # Catch-all; must stay last.
    app.include_router(spa.router)

    return app


def run() -> None:
    """Entry point for the `flowboard` console script."""
    uvicorn.run("flowboard.main:app", host=settings.host, port=settings.port)


app = create_app()
