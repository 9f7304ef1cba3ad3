"""
Test loading of the `env.yaml` configuration.
"""

import logging
from pathlib import Path

import pytest
import yaml

from web3_base_types import DecodeMode
from web3_logging import VERBOSE_LEVEL

from ..env import ENV_PATH_VARIABLE, Config, EnvConfig, RemoteNode, create_default_config


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    """Write a configuration with two nodes."""
    path = tmp_path / "env.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "remote_nodes": [
                    {
                        "name": "mainnet",
                        "node_url": "https://rpc.example.com",
                        "rpc_headers": {"client-secret": "s3cret"},
                    },
                    {"name": "local", "node_url": "http://127.0.0.1:8545", "timeout": 5},
                ],
                "decode_mode": "strict",
                "log_level": "verbose",
            }
        )
    )
    return path


def test_load(env_file: Path):
    """Test that the file is parsed into validated models."""
    config = EnvConfig(env_file)
    assert len(config.remote_nodes) == 2
    assert config.decode_mode == DecodeMode.STRICT
    assert config.log_level == VERBOSE_LEVEL

    mainnet = config.get_remote_node("mainnet")
    assert mainnet.node_url.host == "rpc.example.com"
    assert mainnet.rpc_headers == {"client-secret": "s3cret"}
    assert mainnet.timeout == 30.0
    assert config.get_remote_node("local").timeout == 5


def test_path_from_environment(env_file: Path, monkeypatch: pytest.MonkeyPatch):
    """Test that `WEB3_ENV_PATH` selects the file to load."""
    monkeypatch.setenv(ENV_PATH_VARIABLE, str(env_file))
    assert EnvConfig().get_remote_node("local").node_url.port == 8545


def test_unknown_node(env_file: Path):
    """Test looking up a node that is not configured."""
    with pytest.raises(KeyError, match="sepolia"):
        EnvConfig(env_file).get_remote_node("sepolia")


def test_missing_file(tmp_path: Path):
    """Test that a missing file is reported with its path."""
    with pytest.raises(FileNotFoundError, match="env.yaml"):
        EnvConfig(tmp_path / "env.yaml")


@pytest.mark.parametrize(
    "contents",
    [
        {"remote_nodes": [{"name": "bad", "node_url": "not a url"}]},
        {"remote_nodes": [{"name": "bad", "timeout": 0}]},
        {"decode_mode": "sloppy"},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_file(tmp_path: Path, contents):
    """Test that invalid contents raise `ValueError`."""
    path = tmp_path / "env.yaml"
    path.write_text(yaml.safe_dump(contents))
    with pytest.raises(ValueError, match="Invalid configuration"):
        EnvConfig(path)


def test_empty_file(tmp_path: Path):
    """Test that an empty file yields the defaults."""
    path = tmp_path / "env.yaml"
    path.write_text("")
    config = EnvConfig(path)
    assert config.decode_mode == DecodeMode.LENIENT
    assert config.log_level == logging.INFO
    assert config.remote_nodes == [RemoteNode()]


def test_create_default_config(tmp_path: Path):
    """Test that the default file can be loaded back."""
    path = create_default_config(tmp_path / "env.yaml")
    assert EnvConfig(path).remote_nodes == Config().remote_nodes
    assert Config(**yaml.safe_load(path.read_text())) == Config()

    with pytest.raises(FileExistsError):
        create_default_config(path)
