"""
FlowBoard Backend: Abstract Mail Dispatcher Interface
=====================================================

What:  The contract for sending one HTML email.
How:   Concrete dispatchers inherit from MailDispatcher and implement send().
Who:   Called by ContactService and LeadService after a record is stored.

Implementations:
    - SMTPMailDispatcher: delivers through the configured SMTP relay
    - Test doubles in tests/conftest.py record or reject messages

Retry and timeout policy, if ever added, belongs in an implementation;
the services only see "sent" or an exception.
"""

from abc import ABC, abstractmethod


class MailDispatcher(ABC):
    """
    Abstract capability for delivering templated HTML email.

    Contract:
        - send() returns once the message has been handed to the transport
        - Any failure raises; implementations wrap transport errors in
          MailDeliveryError
        - No retries: one call is one delivery attempt
    """

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        """
        Deliver one email.

        Args:
            to:      Recipient address.
            subject: Subject line.
            html:    Complete HTML body.

        Raises:
            MailDeliveryError: The transport rejected or could not deliver the message.
        """
        ...
