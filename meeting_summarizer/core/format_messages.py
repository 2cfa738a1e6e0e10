"""Completion Message Formatting - pure functions shaping LLM input and output.

Invariants:
    - User message layout: "{prompt}\n\nTranscript:\n{transcript}" (prompt first)
    - Prompt and transcript are passed through verbatim (no trimming, no truncation)
    - extract_summary_text joins text blocks in order; non-text blocks are ignored
    - Empty completions fall back to FALLBACK_SUMMARY
"""

FALLBACK_SUMMARY = "Unable to generate summary"


def format_user_message(prompt: str, transcript: str) -> dict:
    """Build the single user turn sent to the completion API."""
    return {
        "role": "user",
        "content": f"{prompt}\n\nTranscript:\n{transcript}",
    }


def extract_summary_text(response) -> str:
    """Concatenate text content blocks of a Messages API response."""
    parts = [
        block.text for block in (getattr(response, "content", None) or [])
        if getattr(block, "type", None) == "text" and block.text
    ]
    text = "".join(parts)
    return text if text else FALLBACK_SUMMARY
