"""Tests for environment-driven configuration.

Run with: pytest tests/test_environment.py -v
"""

import pytest
from pydantic import ValidationError

from config.environment import Environment


@pytest.fixture
def environment(monkeypatch, tmp_path):
    """Build an Environment isolated from the real process env and .env file."""
    monkeypatch.chdir(tmp_path)
    for name in Environment.model_fields:
        monkeypatch.delenv(name, raising=False)

    def build(**values) -> Environment:
        for name, value in values.items():
            monkeypatch.setenv(name, value)
        return Environment()

    return build


def test_defaults(environment):
    env = environment()

    assert env.DJANGO_DEBUG is False
    assert env.allowed_hosts == ["localhost", "127.0.0.1"]
    assert env.EVENTS_REGISTRATION_MAX_ATTEMPTS == 3
    assert env.EVENTS_CACHE_TIMEOUT == 300


def test_reads_process_environment(environment):
    env = environment(
        DJANGO_DEBUG="true",
        DJANGO_ALLOWED_HOSTS="api.example.com, admin.example.com,",
        DJANGO_LOG_LEVEL="debug",
        EVENTS_REGISTRATION_MAX_ATTEMPTS="5",
    )

    assert env.DJANGO_DEBUG is True
    assert env.allowed_hosts == ["api.example.com", "admin.example.com"]
    assert env.log_level == "DEBUG"
    assert env.EVENTS_REGISTRATION_MAX_ATTEMPTS == 5


def test_reads_dotenv_file(environment, tmp_path):
    (tmp_path / ".env").write_text("EVENTS_CACHE_TIMEOUT=42\n")

    assert environment().EVENTS_CACHE_TIMEOUT == 42


def test_rejects_zero_attempts(environment):
    with pytest.raises(ValidationError):
        environment(EVENTS_REGISTRATION_MAX_ATTEMPTS="0")


def test_rejects_non_numeric_timeout(environment):
    with pytest.raises(ValidationError):
        environment(EVENTS_CACHE_TIMEOUT="soon")
