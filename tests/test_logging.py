"""
Tests for logging configuration.
"""

import logging

import pytest

from app.core.config import Settings
from app.shared.logging import THIRD_PARTY_LOGGERS, configure_logging, resolve_level


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    third_party = {name: logging.getLogger(name).level for name in THIRD_PARTY_LOGGERS}
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    for name, level in third_party.items():
        logging.getLogger(name).setLevel(level)


class TestResolveLevel:
    """Root level follows LOG_LEVEL, capped in test mode."""

    def test_development_uses_configured_level(self) -> None:
        assert resolve_level(Settings(environment="development", log_level="DEBUG")) == logging.DEBUG

    def test_lowercase_name_accepted(self) -> None:
        assert resolve_level(Settings(environment="development", log_level="warning")) == logging.WARNING

    def test_test_mode_capped_at_warning(self) -> None:
        assert resolve_level(Settings(environment="test", log_level="DEBUG")) == logging.WARNING

    def test_test_mode_keeps_higher_level(self) -> None:
        assert resolve_level(Settings(environment="test", log_level="ERROR")) == logging.ERROR

    def test_unknown_name_falls_back_to_info(self) -> None:
        assert resolve_level(Settings(environment="development", log_level="chatty")) == logging.INFO


class TestConfigureLogging:
    def test_root_and_third_party_levels(self, restore_logging) -> None:
        configure_logging(Settings(environment="development", log_level="DEBUG"))

        assert logging.getLogger().level == logging.DEBUG
        for name in THIRD_PARTY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_third_party_follow_stricter_root(self, restore_logging) -> None:
        configure_logging(Settings(environment="production", log_level="ERROR"))

        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
