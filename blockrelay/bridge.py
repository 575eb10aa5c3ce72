"""Fetch-and-forward orchestration."""

import logging

from blockrelay.fetching import BlockFetcher
from blockrelay.protocol import Block
from blockrelay.relay import BlockRelay
from blockrelay.types import BlockHeight, Endpoint

logger = logging.getLogger(__name__)


class BlockBridge:
    """Fetches one block from the indexer and relays it to a validator."""
    
    def __init__(self, fetcher: BlockFetcher, relay: BlockRelay):
        self.fetcher = fetcher
        self.relay = relay
    
    async def run(self, height: BlockHeight, endpoint: Endpoint) -> Block:
        """
        Fetch block `height`, then broadcast it to `endpoint`.
        
        FetchError and RelayError propagate unchanged; nothing is relayed
        unless the fetch succeeded. Returns the relayed block.
        """
        block = await self.fetcher.fetch(height)
        await self.relay.relay(block, endpoint)
        return block
