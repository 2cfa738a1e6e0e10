"""Meeting Summarizer - summarize meeting transcripts with an LLM and share them by email.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
