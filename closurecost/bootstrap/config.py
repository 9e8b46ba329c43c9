"""
bootstrap/config.py - Engine configuration

Provides configuration loading from environment variables and defaults.
The calculation engine never reads this; only the CLI and the reporting
layer consume it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import os
import logging

logger = logging.getLogger("bootstrap.config")


@dataclass
class CurrencyConfig:
    """Currency presentation settings."""

    symbol: str = "$"
    code: str = "AUD"
    locale: str = "en-AU"

    @classmethod
    def from_env(cls) -> "CurrencyConfig":
        return cls(
            symbol=os.getenv("CLOSURECOST_CURRENCY_SYMBOL", "$"),
            code=os.getenv("CLOSURECOST_CURRENCY_CODE", "AUD"),
            locale=os.getenv("CLOSURECOST_CURRENCY_LOCALE", "en-AU"),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("CLOSURECOST_LOG_LEVEL", "INFO"),
            format=os.getenv(
                "CLOSURECOST_LOG_FORMAT",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            ),
            log_file=os.getenv("CLOSURECOST_LOG_FILE"),
        )


@dataclass
class EngineConfig:
    """Root configuration for closurecost."""

    variation_percent: float = 10.0
    csv_delimiter: str = ","

    currency: CurrencyConfig = field(default_factory=CurrencyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables."""
        return cls(
            variation_percent=float(os.getenv("CLOSURECOST_VARIATION_PERCENT", "10.0")),
            csv_delimiter=os.getenv("CLOSURECOST_CSV_DELIMITER", ","),
            currency=CurrencyConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variation_percent": self.variation_percent,
            "csv_delimiter": self.csv_delimiter,
            "currency": {
                "symbol": self.currency.symbol,
                "code": self.currency.code,
                "locale": self.currency.locale,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
            },
        }


# Global config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get current configuration, loading from the environment if needed."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
        logger.debug(f"Configuration loaded: {_config.to_dict()}")
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads."""
    global _config
    _config = None
