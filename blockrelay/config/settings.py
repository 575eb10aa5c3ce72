"""
Configuration settings - read from the environment and an optional .env file
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import dotenv_values

from blockrelay.errors import ConfigurationError
from blockrelay.fetching.client import DEFAULT_INDEXER_URL, DEFAULT_TIMEOUT
from blockrelay.types import DEFAULT_GRPC_PORT, Endpoint


@dataclass(frozen=True)
class Settings:
    """Application settings, built once per process"""

    # ===================
    # Block
    # ===================
    block_height: int

    # ===================
    # Indexer
    # ===================
    indexer_auth: str = field(repr=False)
    indexer_url: str = DEFAULT_INDEXER_URL
    indexer_timeout: float = DEFAULT_TIMEOUT

    # ===================
    # Validator gRPC
    # ===================
    grpc_address: Optional[str] = None
    grpc_port: int = DEFAULT_GRPC_PORT

    log_level: str = "INFO"

    @property
    def endpoint(self) -> Endpoint:
        if not self.grpc_address:
            raise ConfigurationError("GRPC_ADDRESS environment variable not set")
        return Endpoint(self.grpc_address, self.grpc_port)


def _require(values: Mapping[str, str], name: str) -> str:
    value = (values.get(name) or "").strip()
    if not value:
        raise ConfigurationError(f"{name} environment variable not set")
    return value


def parse_block_height(raw: str) -> int:
    try:
        height = int(raw)
    except ValueError:
        raise ConfigurationError(f"invalid BLOCK_HEIGHT: {raw!r}") from None
    if height < 0:
        raise ConfigurationError(f"invalid BLOCK_HEIGHT: {raw!r} is negative")
    return height


def _parse_port(raw: Optional[str]) -> int:
    if not raw or not raw.strip():
        return DEFAULT_GRPC_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"invalid GRPC_PORT: {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"invalid GRPC_PORT: {port} out of range")
    return port


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"invalid INDEXER_TIMEOUT: {raw!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"invalid INDEXER_TIMEOUT: {raw!r} must be positive")
    return timeout


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"invalid LOG_LEVEL: {raw!r}")
    return level


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[str] = ".env",
    require_relay: bool = True,
    block_height: Optional[int] = None,
) -> Settings:
    """
    Build Settings from `environ` (default: os.environ) layered over `env_file`.

    Variables already present in the environment win over the .env file.
    `block_height` overrides BLOCK_HEIGHT. Set `require_relay` to False for
    fetch-only runs that never contact a validator.
    """
    values = {}
    if env_file and os.path.isfile(env_file):
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ if environ is None else environ)

    if block_height is None:
        block_height = parse_block_height(_require(values, "BLOCK_HEIGHT"))
    elif block_height < 0:
        raise ConfigurationError(f"invalid block height: {block_height} is negative")

    settings = Settings(
        block_height=block_height,
        indexer_auth=_require(values, "INDEXER_AUTH"),
        indexer_url=values.get("INDEXER_URL") or DEFAULT_INDEXER_URL,
        indexer_timeout=_parse_timeout(values.get("INDEXER_TIMEOUT")),
        grpc_address=(values.get("GRPC_ADDRESS") or "").strip() or None,
        grpc_port=_parse_port(values.get("GRPC_PORT")),
        log_level=_parse_log_level(values.get("LOG_LEVEL")),
    )
    if require_relay and not settings.grpc_address:
        raise ConfigurationError("GRPC_ADDRESS environment variable not set")
    return settings
