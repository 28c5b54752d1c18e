"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from core.config import Settings, load_settings
from core.constants import IMGFLIP_API_BASE_URL


def test_default_settings() -> None:
    """Test default settings values."""
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.api_base_url == IMGFLIP_API_BASE_URL
    assert settings.timeout is None
    assert settings.user_agent is None
    assert settings.has_credentials is False


@pytest.mark.parametrize(
    "username,password,expected",
    [
        ("user", "secret", True),
        ("user", None, False),
        (None, "secret", False),
        ("", "", False),
    ],
)
def test_has_credentials(
    username: str | None, password: str | None, expected: bool
) -> None:
    """Test credentials are only reported when both are present."""
    settings = Settings(username=username, password=password)
    assert settings.has_credentials is expected


def test_password_hidden_from_repr() -> None:
    """Test the password never shows up in the settings repr."""
    settings = Settings(username="user", password="secret")
    assert "secret" not in repr(settings)


def test_load_settings_from_environment() -> None:
    """Test loading settings from IMGFLIP_* variables."""
    env = {
        "IMGFLIP_LOG_LEVEL": "debug",
        "IMGFLIP_API_BASE_URL": "http://localhost:8080",
        "IMGFLIP_TIMEOUT": "2.5",
        "IMGFLIP_USER_AGENT": "test-agent",
        "IMGFLIP_USERNAME": "user",
        "IMGFLIP_PASSWORD": "secret",
    }
    with patch("core.config.load_dotenv"), patch.dict(os.environ, env, clear=True):
        settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.api_base_url == "http://localhost:8080"
    assert settings.timeout == 2.5
    assert settings.user_agent == "test-agent"
    assert settings.has_credentials is True


def test_load_settings_defaults() -> None:
    """Test load_settings without any environment variables."""
    with patch("core.config.load_dotenv"), patch.dict(os.environ, {}, clear=True):
        settings = load_settings()

    assert settings.api_base_url == IMGFLIP_API_BASE_URL
    assert settings.timeout is None
    assert settings.username is None
    assert settings.password is None
