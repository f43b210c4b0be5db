"""
FlowBoard Backend: SMTP Mail Dispatcher
=======================================

What:  MailDispatcher implementation that talks to an SMTP relay with smtplib.
How:   Each send() opens a connection, upgrades it with STARTTLS when the relay
       advertises it, logs in when credentials are configured, hands over one
       message and quits. The blocking smtplib work runs in FastAPI's
       threadpool so the event loop keeps serving other requests.
Who:   Built once per application by build_mail_dispatcher(); shared by all
       services.

Connection settings (from config):
    SMTP_HOST / SMTP_PORT   relay address (default smtp.gmail.com:587)
    SMTP_USER / SMTP_PASS   login; SMTP_USER is also the From address
    Implicit TLS is never used.

Failure semantics:
    One attempt per send(). smtplib and socket errors are raised as
    MailDeliveryError. There is no timeout beyond the operating system's:
    a relay that accepts the connection and then stalls stalls the request.
"""

import logging
import smtplib
import time
import uuid
from email.message import EmailMessage
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from flowboard.config import Settings, settings as default_settings
from flowboard.exceptions import MailDeliveryError
from flowboard.services.mail_base import MailDispatcher

logger = logging.getLogger(__name__)


class SMTPMailDispatcher(MailDispatcher):
    """
    Sends HTML email through an SMTP relay.

    A new connection is opened per message. The marketing site sends a
    handful of emails per submission, so connection reuse is not worth the
    reconnect handling it would need.
    """

    def __init__(
        self,
        host: str,
        port: int,
        user: str = "",
        password: str = "",
        sender: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender if sender is not None else user

        logger.info(
            "SMTPMailDispatcher initialized with relay=%s:%d, auth=%s",
            host,
            port,
            "yes" if user and password else "no",
        )

    def build_message(self, to: str, subject: str, html: str) -> EmailMessage:
        """Assemble the MIME message: HTML body, From = sender."""
        message = EmailMessage()
        if self.sender:
            message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html, subtype="html")
        return message

    async def send(self, to: str, subject: str, html: str) -> None:
        """
        Deliver one message through the relay.

        Raises:
            MailDeliveryError: connection, STARTTLS, login or delivery failed.
        """
        # Short id to tie the start/finish/failure log lines together.
        send_id = str(uuid.uuid4())[:8]
        message = self.build_message(to, subject, html)
        start_time = time.perf_counter()

        logger.info("[%s] Sending email to %s: %s", send_id, to, subject)

        try:
            await run_in_threadpool(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.warning(
                "[%s] SMTP delivery to %s failed after %.0fms: %s",
                send_id,
                to,
                duration_ms,
                str(e),
            )
            raise MailDeliveryError(
                message="Email delivery failed",
                recipient=to,
                context={"send_id": send_id, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info("[%s] Email to %s sent in %.0fms", send_id, to, duration_ms)

    def _deliver(self, message: EmailMessage) -> None:
        """Blocking SMTP conversation. Runs in a worker thread."""
        with smtplib.SMTP(self.host, self.port) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            if self.user and self.password:
                smtp.login(self.user, self.password)
            smtp.send_message(message)


def build_mail_dispatcher(config: Optional[Settings] = None) -> SMTPMailDispatcher:
    """Create the production dispatcher from settings."""
    config = config or default_settings
    return SMTPMailDispatcher(
        host=config.smtp_host,
        port=config.smtp_port,
        user=config.smtp_user,
        password=config.smtp_pass,
    )
