"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded)
    - Missing credentials are allowed at startup; handlers reject requests per call
    - get_settings() is cached (lru_cache) - single instance per process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Anthropic
    anthropic_api_key: str | None = None
    anthropic_max_retries: int = 3
    anthropic_timeout_seconds: int = 120
    anthropic_base_delay_ms: int = 1000
    anthropic_max_delay_ms: int = 30_000

    # Summary generation
    summary_model: str = "claude-sonnet-4-5"
    summary_temperature: float = 0.5
    summary_max_tokens: int = 2048

    # Mail relay (EMAIL_USER / EMAIL_PASS)
    email_user: str | None = None
    email_pass: str | None = None
    email_from: str | None = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_use_ssl: bool = True
    smtp_timeout_seconds: int = 30

    @field_validator(
        "anthropic_api_key", "email_user", "email_pass", "email_from",
        mode="before",
    )
    @classmethod
    def blank_as_none(cls, v):
        """An empty KEY= line in .env counts as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:8000"]
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def llm_configured(self) -> bool:
        return bool(self.anthropic_api_key)

    @property
    def email_configured(self) -> bool:
        return bool(self.email_user and self.email_pass)

    @property
    def sender_address(self) -> str | None:
        return self.email_from or self.email_user


@lru_cache
def get_settings() -> Settings:
    return Settings()
