"""Tests for `web3_base_types`."""
