"""Local pytest configuration shared by the unit tests of all packages."""

pytest_plugins = ["web3_logging.pytest_plugin"]
