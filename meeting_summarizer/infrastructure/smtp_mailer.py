"""SMTP Mailer - delivers prepared messages through an authenticated SMTP relay.

Invariants:
    - One SMTP session per send (connect, login, send_message, quit)
    - Implicit TLS (SMTP_SSL) by default; STARTTLS when use_ssl is False
    - Blocking smtplib calls run in a worker thread, never on the event loop
    - All smtplib / socket failures mapped to MailRelayError (core/errors.py)
"""

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import getaddresses

from meeting_summarizer.core.errors import ErrorContext, MailRelayError

logger = logging.getLogger(__name__)


class SMTPMailer:
    """Sends EmailMessage objects via smtplib with error mapping."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_ssl: bool = True,
        timeout_seconds: int = 30,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout_seconds = timeout_seconds

    async def send(
        self, message: EmailMessage, context: ErrorContext | None = None,
    ) -> None:
        """Deliver message; raises MailRelayError on any relay failure."""
        try:
            await asyncio.to_thread(self._send_blocking, message)
        except smtplib.SMTPAuthenticationError as e:
            raise MailRelayError(
                "authentication rejected", "auth", context=context,
            ) from e
        except smtplib.SMTPRecipientsRefused as e:
            raise MailRelayError(
                f"recipients refused: {', '.join(e.recipients)}",
                "recipients_refused", context=context,
            ) from e
        except smtplib.SMTPException as e:
            raise MailRelayError(str(e), "smtp", context=context) from e
        except TimeoutError as e:
            raise MailRelayError(
                f"timed out after {self.timeout_seconds}s", "timeout",
                context=context,
            ) from e
        except OSError as e:
            raise MailRelayError(str(e), "connection", context=context) from e
        logger.info(
            "Email relayed",
            extra={"recipient_count": len(getaddresses(message.get_all("To", [])))},
        )

    def _send_blocking(self, message: EmailMessage) -> None:
        tls = ssl.create_default_context()
        if self.use_ssl:
            server = smtplib.SMTP_SSL(
                self.host, self.port,
                timeout=self.timeout_seconds, context=tls,
            )
        else:
            server = smtplib.SMTP(
                self.host, self.port, timeout=self.timeout_seconds,
            )
        with server:
            if not self.use_ssl:
                server.starttls(context=tls)
            server.login(self.username, self.password)
            server.send_message(message)
