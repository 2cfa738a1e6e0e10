"""Summary Route - POST /api/summarize.

Invariants:
    - 200 {"summary": str} on success, completion text verbatim
    - 400 MISSING_FIELDS when transcript or prompt is blank
    - 500 CONFIGURATION_MISSING without ANTHROPIC_API_KEY
    - 500 SUMMARY_GENERATION_FAILED when the completion call fails
"""

from fastapi import APIRouter, Depends

from meeting_summarizer.api.dependencies import get_summary_service
from meeting_summarizer.schemas.summary import SummarizeRequest, SummarizeResponse
from meeting_summarizer.services.summarize import SummaryService

router = APIRouter(prefix="/api", tags=["summary"])


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    body: SummarizeRequest,
    service: SummaryService = Depends(get_summary_service),
):
    """Generate a summary of the transcript following the prompt."""
    summary = await service.summarize(body.transcript, body.prompt)
    return SummarizeResponse(summary=summary)
