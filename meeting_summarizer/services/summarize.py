"""Summary Service - validates a transcript + prompt and relays it to the completion API.

Invariants:
    - Check order: required fields (400), then ANTHROPIC_API_KEY (500), then the API call
    - Successful completion text is returned verbatim
    - AnthropicAPIError becomes SummaryGenerationError (generic message); cause is logged
    - The Anthropic client is created lazily, only after validation passes
"""

import logging
from collections.abc import Callable

from meeting_summarizer.config import Settings
from meeting_summarizer.core.enforce_input import SUMMARY_FIELDS_MESSAGE, require_fields
from meeting_summarizer.core.errors import (
    AnthropicAPIError,
    ConfigurationMissingError,
    ErrorContext,
    SummaryGenerationError,
)
from meeting_summarizer.core.format_messages import extract_summary_text, format_user_message
from meeting_summarizer.infrastructure.anthropic_client import ResilientAnthropicClient
from meeting_summarizer.services.system_prompt import SUMMARIZER_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_OPERATION = "summarize"


class SummaryService:
    """Per-request summary orchestration."""

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[Settings], ResilientAnthropicClient],
    ):
        self.settings = settings
        self._client_factory = client_factory

    async def summarize(self, transcript: str | None, prompt: str | None) -> str:
        require_fields(
            {"transcript": transcript, "prompt": prompt}, SUMMARY_FIELDS_MESSAGE,
        )
        if not self.settings.llm_configured:
            raise ConfigurationMissingError(
                "ANTHROPIC_API_KEY is not configured",
                settings=["ANTHROPIC_API_KEY"],
                context=ErrorContext(operation=_OPERATION),
            )

        client = self._client_factory(self.settings)
        context = ErrorContext(operation=_OPERATION)
        try:
            response = await client.create_message(
                model=self.settings.summary_model,
                max_tokens=self.settings.summary_max_tokens,
                temperature=self.settings.summary_temperature,
                system=SUMMARIZER_SYSTEM_PROMPT,
                messages=[format_user_message(prompt, transcript)],
                context=context,
            )
        except AnthropicAPIError as e:
            logger.error(
                f"Error generating summary: {e.message}",
                extra={"error_code": e.code, "operation": _OPERATION},
            )
            raise SummaryGenerationError(context=context) from e
        return extract_summary_text(response)
