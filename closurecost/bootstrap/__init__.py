"""
bootstrap/ - Configuration and logging setup for the command-line layer.
"""

from .config import (
    CurrencyConfig,
    LoggingConfig,
    EngineConfig,
    get_config,
    reset_config,
)

from .logging_setup import (
    configure_logging,
    configure_from_config,
)


__all__ = [
    "CurrencyConfig",
    "LoggingConfig",
    "EngineConfig",
    "get_config",
    "reset_config",
    "configure_logging",
    "configure_from_config",
]
