"""
A pytest plugin to configure logging for test sessions that exercise the
web3 packages.

Register it from a `conftest.py` with:

```
pytest_plugins = ["web3_logging.pytest_plugin"]
```
"""

import pytest

from .logging import LogLevel, configure_logging


def pytest_addoption(parser):  # noqa: D103
    logging_group = parser.getgroup(
        "web3 logging", "Arguments related to logging from the web3 packages."
    )
    logging_group.addoption(
        "--web3-log-level",  # --log-level is defined by pytest's built-in logging
        action="store",
        default="INFO",
        type=LogLevel.from_cli,
        dest="web3_log_level",
        help=(
            "The logging level to use in the test session: DEBUG, VERBOSE, INFO, WARNING, "
            "ERROR or CRITICAL, default - INFO. An integer in [0, 50] may be also provided."
        ),
    )
    logging_group.addoption(
        "--web3-log-file",
        action="store",
        default=None,
        dest="web3_log_file",
        help="Also write the session log to this file.",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Initialize logging for the pytest session."""
    configure_logging(
        log_level=config.getoption("web3_log_level"),
        log_file=config.getoption("web3_log_file"),
        log_to_stdout=False,
    )


def pytest_report_header(config: pytest.Config) -> list[str]:
    """Show the log file path in the test session header."""
    if log_file := config.getoption("web3_log_file"):
        return [f"Log file: {log_file}"]
    return []
