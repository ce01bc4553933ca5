"""
Tests for configuration and logging setup.

python -m pytest tests/test_settings.py
"""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from config.settings import ChatAPISettings, Settings, get_settings
from config.logging_config import setup_logging


class TestChatAPISettings:
    """API settings tests."""

    def test_defaults(self, monkeypatch):
        for key in ("CHAT_API_BASE_URL", "CHAT_API_TOKEN", "CHAT_API_TRACE"):
            monkeypatch.delenv(key, raising=False)
        settings = ChatAPISettings(_env_file=None)
        assert settings.CHAT_API_BASE_URL == "https://slack.com/api/"
        assert settings.CHAT_API_TOKEN == ""
        assert settings.CHAT_API_TRACE is False
        assert settings.CHAT_API_UPLOAD_CHUNK_SIZE == 32 * 1024

    def test_base_url_gets_single_trailing_slash(self):
        assert ChatAPISettings(CHAT_API_BASE_URL="https://x.test/api").CHAT_API_BASE_URL == "https://x.test/api/"
        assert ChatAPISettings(CHAT_API_BASE_URL="https://x.test/api//").CHAT_API_BASE_URL == "https://x.test/api/"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CHAT_API_TOKEN", "xoxb-env")
        monkeypatch.setenv("CHAT_API_PIPE_MAX_CHUNKS", "8")
        settings = ChatAPISettings(_env_file=None)
        assert settings.CHAT_API_TOKEN == "xoxb-env"
        assert settings.CHAT_API_PIPE_MAX_CHUNKS == 8

    def test_rejects_zero_chunk_size(self):
        with pytest.raises(ValidationError):
            ChatAPISettings(CHAT_API_UPLOAD_CHUNK_SIZE=0)


class TestSettings:
    """Grouped settings tests."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_shortcuts(self):
        settings = Settings()
        assert settings.CHAT_API_BASE_URL == settings.chat_api.CHAT_API_BASE_URL
        assert settings.LOG_LEVEL == settings.general.LOG_LEVEL


class TestSetupLogging:
    """Logging setup tests."""

    def test_console_only(self):
        with patch("config.logging_config.get_settings") as mock_settings:
            mock_settings.return_value.general.LOG_LEVEL = "DEBUG"
            mock_settings.return_value.logging.LOG_FILE = ""

            root = setup_logging("test")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_with_rotating_file(self, tmp_path):
        log_file = tmp_path / "logs" / "chatapi.log"
        with patch("config.logging_config.get_settings") as mock_settings:
            mock_settings.return_value.general.LOG_LEVEL = "INFO"
            mock_settings.return_value.logging.LOG_RETENTION_DAYS = 2

            root = setup_logging("test", log_file=str(log_file))

        assert len(root.handlers) == 2
        assert log_file.parent.exists()
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        root.setLevel(logging.WARNING)
