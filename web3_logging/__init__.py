"""Logging helpers shared by the web3 packages."""

from .logging import (
    VERBOSE_LEVEL,
    ColorFormatter,
    LogLevel,
    UTCFormatter,
    Web3Logger,
    configure_logging,
    get_logger,
)

__all__ = [
    "VERBOSE_LEVEL",
    "ColorFormatter",
    "LogLevel",
    "UTCFormatter",
    "Web3Logger",
    "configure_logging",
    "get_logger",
]
