"""Tests for `web3_config`."""
