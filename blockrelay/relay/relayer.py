"""Relay decoded blocks to validators."""

import logging

from blockrelay.protocol import Block, block_height_of
from blockrelay.types import Endpoint
from .client import ValidatorClient

logger = logging.getLogger(__name__)

BROADCAST_TIMEOUT = 5.0


class BlockRelay:
    """Broadcasts single blocks, one channel per call."""
    
    def __init__(self, timeout: float = BROADCAST_TIMEOUT):
        self.timeout = timeout
    
    async def relay(self, block: Block, endpoint: Endpoint) -> None:
        """Broadcast `block` to `endpoint`. Raises a RelayError subclass on failure."""
        height = block_height_of(block)
        logger.info(f"Broadcasting block {height} to {endpoint}")
        async with ValidatorClient(endpoint) as client:
            await client.broadcast(block, timeout=self.timeout)
        logger.info(f"Validator {endpoint} accepted block {height}")
