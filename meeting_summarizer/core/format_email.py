"""Summary Email Formatting - builds the MIME message sent to recipients.

Invariants:
    - Subject is flattened to one line and falls back to DEFAULT_SUBJECT when blank
    - Body is multipart/alternative: plain summary first, HTML rendering second
    - Summary text is HTML-escaped before newlines become <br>
    - Pure: builds the message, never sends it
"""

from email.message import EmailMessage
from html import escape

DEFAULT_SUBJECT = "Meeting Summary"
FOOTER_TEXT = "This email was sent via AI Meeting Summarizer"

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <style>
    body {{
      font-family: Arial, sans-serif;
      line-height: 1.6;
      color: #333;
      max-width: 600px;
      margin: 0 auto;
      padding: 20px;
    }}
    h2 {{
      color: #0070f3;
      border-bottom: 2px solid #0070f3;
      padding-bottom: 10px;
    }}
    .summary-content {{
      background-color: #f5f5f5;
      padding: 20px;
      border-radius: 8px;
      margin-top: 20px;
      white-space: pre-wrap;
    }}
    .footer {{
      margin-top: 30px;
      padding-top: 20px;
      border-top: 1px solid #ddd;
      font-size: 12px;
      color: #666;
    }}
  </style>
</head>
<body>
  <h2>Meeting Summary</h2>
  <div class="summary-content">{summary}</div>
  <div class="footer">
    {footer}
  </div>
</body>
</html>
"""


def resolve_subject(subject: str | None) -> str:
    """Single-line subject; runs of whitespace (CR/LF included) collapse to one space."""
    flattened = " ".join(subject.split()) if subject else ""
    return flattened or DEFAULT_SUBJECT


def render_summary_html(summary: str) -> str:
    """Render the summary into the HTML email body."""
    body = escape(summary).replace("\r\n", "\n").replace("\n", "<br>")
    return _HTML_TEMPLATE.format(summary=body, footer=FOOTER_TEXT)


def build_summary_message(
    *, sender: str, recipients: list[str], subject: str | None, summary: str,
) -> EmailMessage:
    """Build the multipart summary email."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = ", ".join(recipients)
    message["Subject"] = resolve_subject(subject)
    message.set_content(summary)
    message.add_alternative(render_summary_html(summary), subtype="html")
    return message
