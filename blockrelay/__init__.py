"""
Zera block relay.

Fetches a block from the Zera indexer and relays it to a validator.

Structure:
    blockrelay/
    ├── types.py          # BlockHeight, Endpoint
    ├── errors.py         # Exception hierarchy
    ├── protocol/         # zera_validator wire schema
    ├── fetching/         # Indexer client and block decoding
    ├── relay/            # Validator gRPC client
    ├── bridge.py         # Fetch-then-relay orchestration
    ├── config/           # Settings from the environment and .env
    └── cli.py            # zera-block-relay and zera-fetch-block entry points

Usage:
    from blockrelay import Endpoint
    from blockrelay.fetching import BlockFetcher, IndexerClient
    from blockrelay.relay import BlockRelay
    from blockrelay.bridge import BlockBridge
"""

from .types import BlockHeight, Endpoint, DEFAULT_GRPC_PORT

__version__ = "0.1.0"

__all__ = [
    "BlockHeight",
    "DEFAULT_GRPC_PORT",
    "Endpoint",
]
