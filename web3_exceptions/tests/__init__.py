"""Tests for `web3_exceptions`."""
