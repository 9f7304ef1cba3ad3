"""Tests for `web3_rpc`."""
