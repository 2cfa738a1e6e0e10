"""Summary email formatting - subject fallback, HTML rendering, MIME structure."""

from meeting_summarizer.core.format_email import (
    DEFAULT_SUBJECT,
    FOOTER_TEXT,
    build_summary_message,
    render_summary_html,
    resolve_subject,
)


def test_subject_fallback():
    assert resolve_subject(None) == DEFAULT_SUBJECT
    assert resolve_subject("  ") == DEFAULT_SUBJECT
    assert resolve_subject(" Q3 review ") == "Q3 review"


def test_html_converts_newlines_to_breaks():
    html = render_summary_html("line one\nline two\r\nline three")
    assert "line one<br>line two<br>line three" in html


def test_html_escapes_markup():
    html = render_summary_html('<script>alert("x")</script> & more')
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&amp; more" in html


def test_html_contains_heading_and_footer():
    html = render_summary_html("text")
    assert "<h2>Meeting Summary</h2>" in html
    assert FOOTER_TEXT in html


def test_message_structure():
    message = build_summary_message(
        sender="me@example.com",
        recipients=["a@x.io", "b@y.io"],
        subject=None,
        summary="Hello\nWorld",
    )
    assert message["From"] == "me@example.com"
    assert message["To"] == "a@x.io, b@y.io"
    assert message["Subject"] == DEFAULT_SUBJECT
    assert message.get_content_type() == "multipart/alternative"
    assert [part.get_content_type() for part in message.iter_parts()] == [
        "text/plain", "text/html",
    ]


def test_subject_line_breaks_flattened():
    assert resolve_subject("Weekly\nsync") == "Weekly sync"
    assert resolve_subject(" Q3\r\n  review\t") == "Q3 review"
    assert resolve_subject("\r\n") == DEFAULT_SUBJECT


def test_message_accepts_multiline_subject():
    message = build_summary_message(
        sender="me@example.com", recipients=["a@x.io"],
        subject="Weekly\r\nsync", summary="s",
    )
    assert message["Subject"] == "Weekly sync"
