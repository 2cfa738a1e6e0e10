"""Service Dependencies - FastAPI providers for the per-request services.

Invariants:
    - One ResilientAnthropicClient per distinct client configuration, reused across requests
    - A fresh SMTPMailer per send (it holds no connection between sends)
    - Tests replace get_summary_service / get_email_service via dependency_overrides
"""

import logging

from fastapi import Depends

from meeting_summarizer.config import Settings, get_settings
from meeting_summarizer.infrastructure.anthropic_client import ResilientAnthropicClient
from meeting_summarizer.infrastructure.smtp_mailer import SMTPMailer
from meeting_summarizer.services.send_email import EmailService
from meeting_summarizer.services.summarize import SummaryService

logger = logging.getLogger(__name__)

# Single-process cache keyed by client configuration; emptied on shutdown
_anthropic_clients: dict[tuple, ResilientAnthropicClient] = {}


def build_anthropic_client(settings: Settings) -> ResilientAnthropicClient:
    key = (
        settings.anthropic_api_key,
        settings.anthropic_max_retries,
        settings.anthropic_base_delay_ms,
        settings.anthropic_max_delay_ms,
        settings.anthropic_timeout_seconds,
    )
    client = _anthropic_clients.get(key)
    if client is None:
        client = ResilientAnthropicClient(
            api_key=settings.anthropic_api_key,
            max_retries=settings.anthropic_max_retries,
            base_delay_ms=settings.anthropic_base_delay_ms,
            max_delay_ms=settings.anthropic_max_delay_ms,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
        _anthropic_clients[key] = client
    return client


async def close_anthropic_clients() -> None:
    while _anthropic_clients:
        _, client = _anthropic_clients.popitem()
        await client.close()


def build_mailer(settings: Settings) -> SMTPMailer:
    return SMTPMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.email_user,
        password=settings.email_pass,
        use_ssl=settings.smtp_use_ssl,
        timeout_seconds=settings.smtp_timeout_seconds,
    )


def get_summary_service(
    settings: Settings = Depends(get_settings),
) -> SummaryService:
    return SummaryService(settings, build_anthropic_client)


def get_email_service(
    settings: Settings = Depends(get_settings),
) -> EmailService:
    return EmailService(settings, build_mailer)
