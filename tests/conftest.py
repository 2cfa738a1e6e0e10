"""Root conftest - shared test configuration."""

import os

# Ensure tests never talk to real services with real credentials
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("EMAIL_USER", "sender@example.com")
os.environ.setdefault("EMAIL_PASS", "test-app-password")
os.environ.setdefault("LOG_FORMAT", "text")
