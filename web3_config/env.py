"""
Node connection settings read from an `env.yaml` file.

The file is parsed with PyYAML and validated with pydantic so that a typo in
a node url or an unknown decode mode is reported when the file is loaded,
not on the first request.

Functions:
- create_default_config: Writes a default configuration file if none exists.

Classes:
- EnvConfig: Loads the configuration and exposes it as Python objects.
- RemoteNode: A node reachable over HTTP(S).
- Config: The overall configuration structure.

Usage:
- `EnvConfig()` loads `env.yaml` from the working directory, or the file named
  by the `WEB3_ENV_PATH` environment variable.
- `EnvConfig().get_remote_node("mainnet")` returns a node declared in it.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import BaseModel, Field, HttpUrl, ValidationError, field_validator

from web3_base_types import DecodeMode
from web3_logging import LogLevel, get_logger

ENV_PATH_VARIABLE = "WEB3_ENV_PATH"
DEFAULT_ENV_PATH = Path("env.yaml")

logger = get_logger(__name__)


class RemoteNode(BaseModel):
    """
    Represents a configuration for a remote node.

    Attributes:
    - name (str): The name the node is looked up by.
    - node_url (HttpUrl): The URL of the node's RPC endpoint.
    - rpc_headers (Dict[str, str]): Extra headers sent with every request.
    - timeout (float): Seconds to wait for a response.

    """

    name: str = "mainnet"
    node_url: HttpUrl = HttpUrl("http://localhost:8545")
    rpc_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(30.0, gt=0)


class Config(BaseModel):
    """
    Represents the overall environment configuration.

    Attributes:
    - remote_nodes (List[RemoteNode]): The nodes that can be connected to.
    - decode_mode (DecodeMode): Policy for malformed values in node responses.
    - log_level (int): Level passed to `configure_logging`; names such as
      "VERBOSE" are accepted.

    """

    remote_nodes: List[RemoteNode] = Field(default_factory=lambda: [RemoteNode()])
    decode_mode: DecodeMode = DecodeMode.LENIENT
    log_level: int = logging.INFO

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, value: str | int) -> int:
        """Parse level names and numbers, rejecting unknown levels."""
        return LogLevel.from_cli(value)


def env_path() -> Path:
    """Return the path of the configuration file to load."""
    return Path(os.environ.get(ENV_PATH_VARIABLE, DEFAULT_ENV_PATH))


def create_default_config(path: Path | None = None) -> Path:
    """
    Write the default configuration to `path`.

    An existing file is never overwritten.

    :raises FileExistsError: if the file already exists.
    """
    if path is None:
        path = env_path()
    if path.exists():
        raise FileExistsError(
            f"The configuration file '{path}' already exists. "
            "Please update it manually if needed."
        )
    with path.open("w") as file:
        yaml.safe_dump(Config().model_dump(mode="json"), file, sort_keys=False)
    logger.info(f"Configuration file created at: {path}")
    return path


class EnvConfig(Config):
    """
    Loads and validates environment configuration from `env.yaml`.

    This is a wrapper class for the Config model. It reads a config file
    from disk into a Config model and then exposes it.
    """

    def __init__(self, path: Path | None = None):
        """Init for the EnvConfig class."""
        if path is None:
            path = env_path()
        if not path.exists():
            raise FileNotFoundError(
                f"The configuration file '{path}' does not exist. "
                "Create it with `create_default_config()`."
            )

        with path.open("r") as file:
            config_data = yaml.safe_load(file) or {}
        try:
            super().__init__(**config_data)
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def get_remote_node(self, name: str) -> RemoteNode:
        """
        Return the remote node called `name`.

        :raises KeyError: if no node has that name.
        """
        for node in self.remote_nodes:
            if node.name == name:
                return node
        raise KeyError(f"No remote node named '{name}' in the configuration.")
