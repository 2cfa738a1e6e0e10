"""Summarizer System Prompt - the fixed instruction sent with every summary request."""

SUMMARIZER_SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes meeting transcripts based on "
    "user instructions. Provide clear, concise, and well-structured summaries."
)
