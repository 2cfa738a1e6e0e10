"""Input Enforcement - required-field checks shared by both request handlers.

Invariants:
    - A field counts as missing when it is None, not a string, or whitespace only
    - Raises MissingFieldsError listing every missing field (request order preserved)
    - Pure function: no IO, no async
"""

from meeting_summarizer.core.errors import MissingFieldsError

SUMMARY_FIELDS_MESSAGE = "Transcript and prompt are required"
EMAIL_FIELDS_MESSAGE = "Recipient email and summary are required"


def is_blank(value: object) -> bool:
    """True when value carries no usable text."""
    return not isinstance(value, str) or not value.strip()


def require_fields(values: dict[str, object], message: str) -> None:
    """Raise MissingFieldsError with `message` if any value is blank."""
    missing = [name for name, value in values.items() if is_blank(value)]
    if missing:
        raise MissingFieldsError(message, fields=missing)
