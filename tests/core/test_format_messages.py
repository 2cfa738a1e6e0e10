"""Completion message formatting - user turn layout and summary extraction."""

from types import SimpleNamespace

from meeting_summarizer.core.format_messages import (
    FALLBACK_SUMMARY,
    extract_summary_text,
    format_user_message,
)


def _block(type, text=None):
    return SimpleNamespace(type=type, text=text)


def test_user_message_puts_prompt_before_transcript():
    msg = format_user_message("Bullet points please", "A: hi\nB: hello")
    assert msg == {
        "role": "user",
        "content": "Bullet points please\n\nTranscript:\nA: hi\nB: hello",
    }


def test_user_message_keeps_whitespace_verbatim():
    msg = format_user_message("  p  ", "\n t \n")
    assert msg["content"] == "  p  \n\nTranscript:\n\n t \n"


def test_extract_joins_text_blocks_in_order():
    response = SimpleNamespace(content=[
        _block("text", "one "), _block("tool_use"), _block("text", "two"),
    ])
    assert extract_summary_text(response) == "one two"


def test_extract_falls_back_on_empty_content():
    assert extract_summary_text(SimpleNamespace(content=[])) == FALLBACK_SUMMARY


def test_extract_falls_back_on_empty_text():
    response = SimpleNamespace(content=[_block("text", "")])
    assert extract_summary_text(response) == FALLBACK_SUMMARY


def test_extract_tolerates_missing_content():
    assert extract_summary_text(SimpleNamespace()) == FALLBACK_SUMMARY
