"""
tests/unit/test_bootstrap_config.py - Tests for configuration and logging setup.
"""

import logging

import pytest
from closurecost.bootstrap.config import (
    CurrencyConfig,
    EngineConfig,
    LoggingConfig,
    get_config,
    reset_config,
)
from closurecost.bootstrap.logging_setup import configure_from_config, configure_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.variation_percent == 10.0
        assert config.csv_delimiter == ","
        assert config.currency.code == "AUD"
        assert config.logging.level == "INFO"

    def test_from_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("CLOSURECOST_VARIATION_PERCENT", "25")
        monkeypatch.setenv("CLOSURECOST_CSV_DELIMITER", ";")
        monkeypatch.setenv("CLOSURECOST_CURRENCY_SYMBOL", "US$")
        monkeypatch.setenv("CLOSURECOST_LOG_LEVEL", "DEBUG")
        config = EngineConfig.from_env()
        assert config.variation_percent == 25.0
        assert config.csv_delimiter == ";"
        assert config.currency.symbol == "US$"
        assert config.logging.level == "DEBUG"

    def test_to_dict(self):
        data = EngineConfig().to_dict()
        assert data["currency"] == {"symbol": "$", "code": "AUD", "locale": "en-AU"}
        assert data["logging"]["log_file"] is None

    def test_get_config_cached(self, monkeypatch):
        """get_config() loads once until reset."""
        monkeypatch.setenv("CLOSURECOST_CSV_DELIMITER", "|")
        first = get_config()
        monkeypatch.setenv("CLOSURECOST_CSV_DELIMITER", ";")
        assert get_config() is first
        reset_config()
        assert get_config().csv_delimiter == ";"

    def test_sub_configs_from_env(self, monkeypatch):
        monkeypatch.setenv("CLOSURECOST_CURRENCY_CODE", "USD")
        monkeypatch.setenv("CLOSURECOST_LOG_FILE", "/tmp/closurecost.log")
        assert CurrencyConfig.from_env().code == "USD"
        assert LoggingConfig.from_env().log_file == "/tmp/closurecost.log"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level(self, restore_root_logger):
        configure_logging("WARNING")
        assert restore_root_logger.level == logging.WARNING

    def test_replaces_own_handlers(self, restore_root_logger):
        """Calling twice does not stack handlers."""
        before = len(restore_root_logger.handlers)
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(restore_root_logger.handlers) == before + 1

    def test_log_file(self, restore_root_logger, tmp_path):
        """Records are also written to the log file."""
        path = tmp_path / "run.log"
        configure_logging("INFO", log_file=str(path), fmt="%(levelname)s %(message)s")
        logging.getLogger("closurecost.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "INFO hello" in path.read_text()

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging("CHATTY")
        assert restore_root_logger.level == logging.INFO

    def test_from_config_override(self, restore_root_logger):
        configure_from_config(LoggingConfig(level="ERROR"), level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG
