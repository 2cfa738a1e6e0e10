"""Email Route - POST /api/send-email.

Invariants:
    - 200 {"success": true, "message": "Email sent successfully"} on delivery
    - 400 MISSING_FIELDS / INVALID_RECIPIENT for bad recipient or blank summary
    - 500 CONFIGURATION_MISSING without EMAIL_USER / EMAIL_PASS
    - 500 EMAIL_DELIVERY_FAILED when the relay fails
"""

from fastapi import APIRouter, Depends

from meeting_summarizer.api.dependencies import get_email_service
from meeting_summarizer.schemas.email import SendEmailRequest, SendEmailResponse
from meeting_summarizer.services.send_email import EmailService

router = APIRouter(prefix="/api", tags=["email"])


@router.post("/send-email", response_model=SendEmailResponse)
async def send_email(
    body: SendEmailRequest,
    service: EmailService = Depends(get_email_service),
):
    """Email the (possibly edited) summary to the listed recipients."""
    await service.send_summary(body.to_email, body.summary, body.subject)
    return SendEmailResponse()
