"""Meeting Summarizer API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MeetingSummarizerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Single-page form served from the package's static/ directory at "/"
    - Cached LLM clients closed on shutdown via the lifespan context manager
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from meeting_summarizer import __version__
from meeting_summarizer.api.dependencies import close_anthropic_clients
from meeting_summarizer.api.error_handlers import register_error_handlers
from meeting_summarizer.api.routes import health, send_email, summarize
from meeting_summarizer.config import get_settings
from meeting_summarizer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.llm_configured:
        logger.warning("ANTHROPIC_API_KEY is not set; /api/summarize will fail")
    if not settings.email_configured:
        logger.warning("EMAIL_USER/EMAIL_PASS not set; /api/send-email will fail")
    logger.info("Meeting Summarizer API started")
    yield
    await close_anthropic_clients()
    logger.info("Meeting Summarizer API shutting down")


app = FastAPI(
    title="AI Meeting Summarizer", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(summarize.router)
app.include_router(send_email.router)

register_error_handlers(app)

# Mounted AFTER API routes so /api/* takes precedence
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "meeting_summarizer.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
