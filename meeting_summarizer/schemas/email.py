"""Email Schemas - POST /api/send-email request and response.

Invariants:
    - Wire field names are camelCase (toEmail); Python attributes are snake_case
    - subject is optional; blank subjects are resolved to the default downstream
"""

from pydantic import BaseModel, ConfigDict, Field


class SendEmailRequest(BaseModel):
    """Summary email request."""
    model_config = ConfigDict(populate_by_name=True)

    to_email: str | None = Field(None, alias="toEmail")
    summary: str | None = None
    subject: str | None = None


class SendEmailResponse(BaseModel):
    success: bool = True
    message: str = "Email sent successfully"
