"""
FlowBoard Backend: Contact Service
==================================

What:  Handles a contact-form submission end to end.
How:   validate → store → notify operator → confirm to visitor.
Who:   Called by POST /api/contact; owns the message store and a MailDispatcher.

Flow:
    ┌──────────┐    ┌──────────┐    ┌───────────────┐    ┌───────────────┐
    │ Validate │───▶│  Append  │───▶│ Notification  │───▶│ Confirmation  │
    │ (400)    │    │  store   │    │ (operator)    │    │ (visitor)     │
    └──────────┘    └──────────┘    └───────────────┘    └───────────────┘

    The two emails are sent one after the other and both must succeed for the
    submission to count as sent. A failure anywhere after validation is
    reported as DispatchError("Failed to send message"); the stored message
    is kept, so the operator can still find it in the store.
"""

import logging
from typing import Optional

from flowboard.exceptions import DispatchError, ValidationError
from flowboard.models.contact import DEFAULT_CONTACT_COMPANY, ContactMessage
from flowboard.schemas.contact import ContactRequest
from flowboard.schemas.site import SubmissionResponse
from flowboard.services import email_templates
from flowboard.services.mail_base import MailDispatcher
from flowboard.services.store import RecordStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
FAILURE_MESSAGE = "Failed to send message"
SUCCESS_MESSAGE = "Message sent successfully"


class ContactService:
    """
    Business logic for the contact form.

    Args:
        store:              Message store the submissions are appended to.
        mailer:             Dispatcher used for both emails.
        notification_email: Operator inbox. When empty, the notification goes
                            to the submitter's own address.
    """

    def __init__(
        self,
        store: RecordStore[ContactMessage],
        mailer: MailDispatcher,
        notification_email: Optional[str] = None,
    ):
        self.store = store
        self.mailer = mailer
        self.notification_email = notification_email or ""

    async def submit(self, request: ContactRequest) -> SubmissionResponse:
        """
        Record a contact message and send both emails.

        Raises:
            ValidationError: name, email or message missing (nothing stored or sent).
            DispatchError:   storing or either email failed.
        """
        missing = [f for f in ("name", "email", "message") if not getattr(request, f)]
        if missing:
            raise ValidationError(message=MISSING_FIELDS_MESSAGE, fields=missing)

        try:
            contact_message = self.store.append(
                ContactMessage(
                    name=request.name,
                    email=request.email,
                    company=request.company or DEFAULT_CONTACT_COMPANY,
                    message=request.message,
                )
            )
            logger.info("Contact message %s stored", contact_message.id)

            notification = email_templates.contact_notification(contact_message)
            await self.mailer.send(
                self.notification_email or contact_message.email,
                notification.subject,
                notification.html,
            )

            confirmation = email_templates.contact_confirmation(contact_message)
            await self.mailer.send(
                contact_message.email,
                confirmation.subject,
                confirmation.html,
            )

        except Exception as e:
            logger.error("Error processing contact form: %s", str(e), exc_info=True)
            raise DispatchError(
                message=FAILURE_MESSAGE,
                context={"error_type": type(e).__name__},
            ) from e

        return SubmissionResponse(message=SUCCESS_MESSAGE)
