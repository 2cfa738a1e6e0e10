"""Error Hierarchy - typed, categorized exceptions for all Meeting Summarizer failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) describe what the caller must fix
    - Delivery errors (500-level) carry a generic user message; the cause is logged, not returned
    - to_response() produces the REST envelope used by every handler

Design Decisions:
    - Infrastructure errors (AnthropicAPIError, MailRelayError) stay inside the
      service layer; services re-raise them as SummaryGenerationError / EmailDeliveryError
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    fields: list[str] | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class MeetingSummarizerError(Exception):
    """Base exception for all Meeting Summarizer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "fields": self.context.fields,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldsError(MeetingSummarizerError):
    """One or more required request fields are missing or blank."""
    def __init__(
        self, message: str, fields: list[str], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.fields = fields
        super().__init__(
            message, "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.fields = fields


class InvalidRecipientError(MeetingSummarizerError):
    """A recipient entry is not shaped like an email address."""
    def __init__(self, address: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid recipient email address: {address}",
            "INVALID_RECIPIENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.address = address


# ─── Configuration Errors (500-level) ───────────────────────────

class ConfigurationMissingError(MeetingSummarizerError):
    """Credentials for an external service are not configured."""
    def __init__(
        self, message: str, settings: list[str], context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFIGURATION_MISSING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.settings = settings


# ─── Delivery Errors (500-level, user-facing) ───────────────────

class SummaryGenerationError(MeetingSummarizerError):
    """The completion API call failed; message is generic."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to generate summary. Please check your API key and try again.",
            "SUMMARY_GENERATION_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 500,
        )


class EmailDeliveryError(MeetingSummarizerError):
    """The mail relay rejected or failed the message; message is generic."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to send email. Please check your email configuration.",
            "EMAIL_DELIVERY_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 500,
        )


# ─── Infrastructure Errors (internal) ───────────────────────────

class AnthropicAPIError(MeetingSummarizerError):
    """Anthropic API call failed."""
    def __init__(
        self,
        message: str,
        api_error_type: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        super().__init__(
            f"Anthropic API error ({api_error_type}): {message}",
            "ANTHROPIC_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.api_error_type = api_error_type


class MailRelayError(MeetingSummarizerError):
    """SMTP relay session failed."""
    def __init__(
        self, message: str, relay_error_type: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Mail relay error ({relay_error_type}): {message}",
            "MAIL_RELAY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.relay_error_type = relay_error_type
