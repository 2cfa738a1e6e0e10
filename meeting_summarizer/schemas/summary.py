"""Summary Schemas - POST /api/summarize request and response."""

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    """Transcript and instruction; both optional here so the service can
    answer a missing field with its own 400 message."""
    transcript: str | None = None
    prompt: str | None = None


class SummarizeResponse(BaseModel):
    summary: str
