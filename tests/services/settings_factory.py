"""Settings builder for tests - ignores any developer .env file."""

from meeting_summarizer.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "anthropic_api_key": "sk-ant-test",
        "email_user": "sender@example.com",
        "email_pass": "app-password",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
