"""Configuration loaded from `env.yaml`."""

from .env import Config, EnvConfig, RemoteNode, create_default_config

__all__ = (
    "Config",
    "EnvConfig",
    "RemoteNode",
    "create_default_config",
)
