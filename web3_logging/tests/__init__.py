"""Tests for `web3_logging`."""
