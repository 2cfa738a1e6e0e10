"""Service test fixtures - FastAPI test client with external services faked.

Invariants:
    - No test reaches the Anthropic API or an SMTP relay
    - app_settings is shared by reference: mutating it in a test changes what the routes see
    - Dependency overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from meeting_summarizer.api.dependencies import get_email_service, get_summary_service
from meeting_summarizer.config import get_settings
from meeting_summarizer.main import app
from meeting_summarizer.services.send_email import EmailService
from meeting_summarizer.services.summarize import SummaryService

from tests.services.fake_mailer import FakeMailer
from tests.services.mock_anthropic import MockAnthropicClient
from tests.services.settings_factory import make_settings


@pytest.fixture
def app_settings():
    return make_settings()


@pytest.fixture
def mock_llm():
    return MockAnthropicClient()


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
async def client(app_settings, mock_llm, fake_mailer):
    """FastAPI test client with services wired to fakes."""
    app.dependency_overrides[get_settings] = lambda: app_settings
    app.dependency_overrides[get_summary_service] = lambda: SummaryService(
        app_settings, lambda settings: mock_llm,
    )
    app.dependency_overrides[get_email_service] = lambda: EmailService(
        app_settings, lambda settings: fake_mailer,
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
