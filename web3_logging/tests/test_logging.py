"""
Tests for the logging module.

These tests verify the functionality of the custom logging system,
including both the standalone configuration and the pytest integration.
"""

import io
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from ..logging import (
    VERBOSE_LEVEL,
    ColorFormatter,
    LogLevel,
    UTCFormatter,
    Web3Logger,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_root_handlers():
    """Restore the root logger's handlers and level after the test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers.copy()
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


def test_verbose_level_registered():
    """Test that the verbose level can be looked up in both directions."""
    assert logging.getLevelName(VERBOSE_LEVEL) == "VERBOSE"
    assert logging.getLevelName("VERBOSE") == VERBOSE_LEVEL
    assert logging.DEBUG < VERBOSE_LEVEL < logging.INFO


def test_get_logger_returns_web3_logger():
    """Test that module loggers support `verbose()`."""
    logger = get_logger("web3_rpc.some_module")
    assert isinstance(logger, Web3Logger)
    assert logger.name == "web3_rpc.some_module"


@pytest.mark.parametrize(
    "level, emitted",
    [(logging.DEBUG, True), (VERBOSE_LEVEL, True), (logging.INFO, False)],
)
def test_verbose_respects_level(caplog: pytest.LogCaptureFixture, level: int, emitted: bool):
    """Test that verbose records are only emitted at VERBOSE or lower."""
    logger = get_logger("test_verbose_respects_level")
    with caplog.at_level(level, logger=logger.name):
        logger.verbose("sent %s", "eth_chainId")
    records = [r for r in caplog.records if r.name == logger.name]
    if emitted:
        assert [(r.levelname, r.getMessage()) for r in records] == [("VERBOSE", "sent eth_chainId")]
    else:
        assert records == []


def test_utc_formatter():
    """Test that timestamps are rendered in UTC with milliseconds."""
    formatter = UTCFormatter(fmt="%(asctime)s %(message)s")
    record = logging.makeLogRecord({"msg": "hello", "created": 1609459200.25})
    assert formatter.format(record) == "2021-01-01 00:00:00.250+00:00 hello"


@pytest.mark.parametrize(
    "level, color",
    [
        (logging.DEBUG, "\033[37m"),
        (VERBOSE_LEVEL, "\033[36m"),
        (logging.WARNING, "\033[33m"),
        (logging.ERROR, "\033[31m"),
    ],
)
def test_color_formatter(monkeypatch: pytest.MonkeyPatch, level: int, color: str):
    """Test that level names are colored outside Docker only."""
    formatter = ColorFormatter(fmt="[%(levelname)s] %(message)s")
    record = logging.makeLogRecord(
        {"levelno": level, "levelname": logging.getLevelName(level), "msg": "message"}
    )

    monkeypatch.setattr(ColorFormatter, "running_in_docker", False)
    assert formatter.format(record) == (
        f"[{color}{logging.getLevelName(level)}\033[0m] message"
    )
    assert record.levelname == logging.getLevelName(level)

    monkeypatch.setattr(ColorFormatter, "running_in_docker", True)
    assert formatter.format(record) == f"[{logging.getLevelName(level)}] message"


class TestLogLevel:
    """Test parsing of log levels from the command line and config files."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("INFO", logging.INFO),
            ("debug", logging.DEBUG),
            ("verbose", VERBOSE_LEVEL),
            ("VERBOSE", VERBOSE_LEVEL),
            ("30", logging.WARNING),
            (15, VERBOSE_LEVEL),
        ],
    )
    def test_from_cli(self, value, expected):
        """Test level names and numbers are accepted."""
        assert LogLevel.from_cli(value) == expected

    def test_from_cli_invalid(self):
        """Test that an unknown name raises with the list of valid names."""
        with pytest.raises(ValueError, match="Invalid log level 'LOUD'"):
            LogLevel.from_cli("LOUD")


@pytest.mark.usefixtures("restore_root_handlers")
class TestConfigureLogging:
    """Test the standalone logging configuration function."""

    def test_configure_logging_defaults(self):
        """Test configure_logging with default parameters."""
        with patch("sys.stdout", new=io.StringIO()):
            handler = configure_logging()

            root_logger = logging.getLogger()
            assert any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers)
            assert root_logger.level == logging.INFO
            assert handler is None

    def test_configure_logging_without_color(self):
        """Test that a non-tty stdout gets the plain UTC formatter."""
        with patch("sys.stdout", new=io.StringIO()):
            configure_logging()
            (stream_handler,) = logging.getLogger().handlers
            assert type(stream_handler.formatter) is UTCFormatter

    def test_configure_logging_with_file(self, tmp_path: Path):
        """Test configure_logging with file output."""
        log_file = tmp_path / "logs" / "test.log"

        handler = configure_logging(log_file=log_file, log_to_stdout=False)

        assert isinstance(handler, logging.FileHandler)
        assert log_file.exists()

        logger = get_logger("test_config")
        logger.info("Test log message")
        handler.flush()

        assert "Test log message" in log_file.read_text()

    def test_configure_logging_with_level(self):
        """Test configure_logging with custom log level."""
        configure_logging(log_level="DEBUG", log_to_stdout=False)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(log_level=VERBOSE_LEVEL, log_to_stdout=False)
        assert logging.getLogger().level == VERBOSE_LEVEL


@pytest.mark.usefixtures("restore_root_handlers")
class TestPytestIntegration:
    """Test the pytest integration of the logging module."""

    def test_pytest_configure(self, tmp_path: Path):
        """Test that pytest_configure sets up file logging from the options."""
        from ..pytest_plugin import pytest_configure

        log_file = tmp_path / "session.log"

        class MockConfig:
            def getoption(self, name):
                return {
                    "web3_log_level": VERBOSE_LEVEL,
                    "web3_log_file": str(log_file),
                }[name]

        pytest_configure(MockConfig())

        root_logger = logging.getLogger()
        assert root_logger.level == VERBOSE_LEVEL
        file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == log_file
        assert log_file.exists()

    def test_pytest_report_header(self):
        """Test that the header names the log file only when one is set."""
        from ..pytest_plugin import pytest_report_header

        class MockConfig:
            def __init__(self, log_file):
                self.log_file = log_file

            def getoption(self, name):
                assert name == "web3_log_file"
                return self.log_file

        assert pytest_report_header(MockConfig("out.log")) == ["Log file: out.log"]
        assert pytest_report_header(MockConfig(None)) == []
