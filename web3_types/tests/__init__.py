"""Tests for `web3_types`."""
