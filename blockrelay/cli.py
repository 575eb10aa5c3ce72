"""
Command line entry points.

    zera-block-relay          fetch BLOCK_HEIGHT and broadcast it to GRPC_ADDRESS:GRPC_PORT
    zera-fetch-block [HEIGHT] fetch one block and print it, never contacting a validator
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from google.protobuf import text_format

from blockrelay.bridge import BlockBridge
from blockrelay.config import Settings, load_settings
from blockrelay.errors import ConfigurationError, FetchError, RelayError
from blockrelay.fetching import BlockFetcher, IndexerClient
from blockrelay.relay import BlockRelay

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_fetcher(settings: Settings) -> BlockFetcher:
    client = IndexerClient(
        credential=settings.indexer_auth,
        base_url=settings.indexer_url,
        timeout=settings.indexer_timeout,
    )
    return BlockFetcher(client)


async def relay_block(settings: Settings) -> bool:
    """Fetch and relay one block, printing a single result line."""
    endpoint = settings.endpoint
    bridge = BlockBridge(build_fetcher(settings), BlockRelay())
    
    try:
        await bridge.run(settings.block_height, endpoint)
    except FetchError as e:
        print(f"Error getting block details: {e}")
        return False
    except RelayError as e:
        print(f"Error sending block via gRPC: {e}")
        return False
    
    print(f"Successfully sent block {settings.block_height} to {endpoint}")
    return True


async def show_block(settings: Settings) -> bool:
    """Fetch one block and print it in text format."""
    try:
        block = await build_fetcher(settings).fetch(settings.block_height)
    except FetchError as e:
        print(f"Error getting block details: {e}")
        return False
    
    print(f"Block {settings.block_height}: {len(block.transactions)} transactions")
    print(text_format.MessageToString(block), end="")
    return True


def run_relay():
    """Entry point for zera-block-relay"""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    _configure_logging(settings)
    
    try:
        asyncio.run(relay_block(settings))
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


def run_fetch(argv: Optional[list] = None):
    """Entry point for zera-fetch-block"""
    parser = argparse.ArgumentParser(description="Fetch and print one block from the Zera indexer")
    parser.add_argument("height", nargs="?", type=int, help="block height (default: BLOCK_HEIGHT)")
    args = parser.parse_args(argv)
    
    try:
        settings = load_settings(require_relay=False, block_height=args.height)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    _configure_logging(settings)
    
    try:
        success = asyncio.run(show_block(settings))
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)
