"""Tests for configuration loading."""

import pytest

from blockrelay.errors import ConfigurationError
from blockrelay.fetching import DEFAULT_INDEXER_URL
from blockrelay.types import Endpoint
from blockrelay.config import load_settings

BASE_ENV = {
    "BLOCK_HEIGHT": "2763",
    "INDEXER_AUTH": "secret-token",
    "GRPC_ADDRESS": "10.0.0.5",
}


def load(**overrides):
    environ = {**BASE_ENV, **overrides}
    return load_settings(environ={k: v for k, v in environ.items() if v is not None}, env_file=None)


def test_defaults():
    settings = load()
    assert settings.block_height == 2763
    assert settings.indexer_auth == "secret-token"
    assert settings.indexer_url == DEFAULT_INDEXER_URL
    assert settings.indexer_timeout == 5.0
    assert settings.grpc_port == 50051
    assert settings.log_level == "INFO"
    assert settings.endpoint == Endpoint("10.0.0.5", 50051)
    assert str(settings.endpoint) == "10.0.0.5:50051"


def test_overrides():
    settings = load(GRPC_PORT="6000", INDEXER_URL="http://localhost:8080", INDEXER_TIMEOUT="2.5", LOG_LEVEL="debug")
    assert settings.endpoint == Endpoint("10.0.0.5", 6000)
    assert settings.indexer_url == "http://localhost:8080"
    assert settings.indexer_timeout == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name", ["BLOCK_HEIGHT", "INDEXER_AUTH", "GRPC_ADDRESS"])
def test_missing_required(name):
    with pytest.raises(ConfigurationError, match=name):
        load(**{name: None})


@pytest.mark.parametrize("overrides", [
    {"BLOCK_HEIGHT": "abc"},
    {"BLOCK_HEIGHT": "-1"},
    {"GRPC_PORT": "grpc"},
    {"GRPC_PORT": "70000"},
    {"INDEXER_TIMEOUT": "0"},
    {"LOG_LEVEL": "LOUD"},
])
def test_malformed_values(overrides):
    with pytest.raises(ConfigurationError):
        load(**overrides)


def test_fetch_only_does_not_need_validator():
    environ = {k: v for k, v in BASE_ENV.items() if k != "GRPC_ADDRESS"}
    settings = load_settings(environ=environ, env_file=None, require_relay=False)
    assert settings.grpc_address is None
    with pytest.raises(ConfigurationError):
        settings.endpoint


def test_block_height_override():
    settings = load_settings(environ={"INDEXER_AUTH": "x"}, env_file=None, require_relay=False, block_height=7)
    assert settings.block_height == 7


def test_credential_not_in_repr():
    assert "secret-token" not in repr(load())


def test_env_file_is_read_and_environment_wins(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("BLOCK_HEIGHT=100\nINDEXER_AUTH=from-file\nGRPC_ADDRESS=file-host\nGRPC_PORT=7000\n")
    
    settings = load_settings(environ={"GRPC_ADDRESS": "env-host"}, env_file=str(env_file))
    
    assert settings.block_height == 100
    assert settings.indexer_auth == "from-file"
    assert settings.endpoint == Endpoint("env-host", 7000)
