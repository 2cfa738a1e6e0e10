"""Email Service - validates a summary email request and hands it to the SMTP relay.

Invariants:
    - Check order: required fields (400), then EMAIL_USER/EMAIL_PASS (500),
      then recipient parsing (400), then delivery
    - Subject defaults to "Meeting Summary"
    - MailRelayError becomes EmailDeliveryError (generic message); cause is logged
"""

import logging
from collections.abc import Callable

from meeting_summarizer.config import Settings
from meeting_summarizer.core.enforce_input import EMAIL_FIELDS_MESSAGE, require_fields
from meeting_summarizer.core.errors import (
    ConfigurationMissingError,
    EmailDeliveryError,
    ErrorContext,
    MailRelayError,
    MissingFieldsError,
)
from meeting_summarizer.core.format_email import build_summary_message
from meeting_summarizer.core.recipients import parse_recipients
from meeting_summarizer.infrastructure.smtp_mailer import SMTPMailer

logger = logging.getLogger(__name__)

_OPERATION = "send_email"


class EmailService:
    """Per-request email orchestration."""

    def __init__(
        self,
        settings: Settings,
        mailer_factory: Callable[[Settings], SMTPMailer],
    ):
        self.settings = settings
        self._mailer_factory = mailer_factory

    async def send_summary(
        self, to_email: str | None, summary: str | None, subject: str | None,
    ) -> list[str]:
        """Send the summary; returns the recipient list it was addressed to."""
        require_fields(
            {"toEmail": to_email, "summary": summary}, EMAIL_FIELDS_MESSAGE,
        )
        if not self.settings.email_configured:
            raise ConfigurationMissingError(
                "Email configuration is missing. "
                "Please set EMAIL_USER and EMAIL_PASS in .env",
                settings=["EMAIL_USER", "EMAIL_PASS"],
                context=ErrorContext(operation=_OPERATION),
            )

        recipients = parse_recipients(to_email)
        if not recipients:
            raise MissingFieldsError(EMAIL_FIELDS_MESSAGE, fields=["toEmail"])

        message = build_summary_message(
            sender=self.settings.sender_address,
            recipients=recipients,
            subject=subject,
            summary=summary,
        )
        context = ErrorContext(operation=_OPERATION)
        mailer = self._mailer_factory(self.settings)
        try:
            await mailer.send(message, context=context)
        except MailRelayError as e:
            logger.error(
                f"Error sending email: {e.message}",
                extra={"error_code": e.code, "operation": _OPERATION},
            )
            raise EmailDeliveryError(context=context) from e
        logger.info(
            "Summary email sent",
            extra={"recipient_count": len(recipients), "operation": _OPERATION},
        )
        return recipients
