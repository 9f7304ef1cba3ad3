"""
Logging configuration shared by all web3 packages.

Library modules only ever call `get_logger(__name__)`; it is up to the host
process (or the pytest plugin in `web3_logging.pytest_plugin`) to call
`configure_logging` and decide where the records go.

Note: request and response traffic is logged at the custom `VERBOSE` level so
that it can be enabled without drowning in third-party `DEBUG` output
(`urllib3` and `websockets` are chatty).
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Union, cast

VERBOSE_LEVEL = 15  # DEBUG < VERBOSE < INFO

logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Web3Logger(logging.Logger):
    """Logger class that knows about the `VERBOSE` level."""

    def verbose(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """
        Log `msg` at `VERBOSE` level.

        Used for RPC traffic: more detail than INFO, far less noise than the
        DEBUG output of the HTTP and WebSocket libraries.
        """
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(Web3Logger)


def get_logger(name: str) -> Web3Logger:
    """Get a properly-typed logger with the custom logging levels."""
    return cast(Web3Logger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Formatter that renders timestamps in UTC, e.g. `2021-01-01 00:00:00.000+00:00`."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(sep=" ", timespec="milliseconds")


class ColorFormatter(UTCFormatter):
    """
    UTC formatter that wraps the level name in ANSI colors.

    Colors are left out inside Docker, where the output usually ends up in a
    log collector rather than a terminal.
    """

    running_in_docker: ClassVar[bool] = Path("/.dockerenv").exists()

    LEVEL_COLORS: ClassVar[Dict[int, str]] = {
        logging.DEBUG: "\033[37m",
        VERBOSE_LEVEL: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format a colored copy of `record`, leaving the original for other handlers."""
        if self.running_in_docker:
            return super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        colored = logging.makeLogRecord(
            record.__dict__ | {"levelname": f"{color}{record.levelname}{self.RESET}"}
        )
        return super().format(colored)


class LogLevel:
    """Parse a log level given on the command line or in `env.yaml`."""

    @classmethod
    def from_cli(cls, value: str | int) -> int:
        """
        Return the numeric level for a level name (any case, custom levels
        included) or a number.
        """
        if isinstance(value, int):
            return value
        text = value.strip()
        if text.isdigit():
            return int(text)
        levels = logging.getLevelNamesMapping()
        if text.upper() in levels:
            return levels[text.upper()]
        raise ValueError(
            f"Invalid log level '{value}'. Expected one of: {', '.join(levels)} or a number."
        )


def configure_logging(
    log_level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_to_stdout: bool = True,
    log_format: str = DEFAULT_FORMAT,
    use_color: Optional[bool] = None,
) -> Optional[logging.FileHandler]:
    """
    Replace the root logger's handlers according to the arguments.

    Args:
        log_level: Level name or number for the root logger
        log_file: Also write records to this file, creating its directory
        log_to_stdout: Write records to stdout
        log_format: Format string shared by all handlers
        use_color: Color the level names on stdout; by default only when
            stdout is a terminal outside Docker

    Returns:
        The file handler if `log_file` is given, otherwise None

    """
    root = logging.getLogger()
    root.setLevel(LogLevel.from_cli(log_level))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    file_handler = None
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=log_format))
        root.addHandler(file_handler)

    if log_to_stdout:
        if use_color is None:
            use_color = sys.stdout.isatty() and not ColorFormatter.running_in_docker
        formatter_class = ColorFormatter if use_color else UTCFormatter
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter_class(fmt=log_format))
        root.addHandler(stdout_handler)

    logger.verbose(f"Logging configured at level {logging.getLevelName(root.level)}.")
    return file_handler
