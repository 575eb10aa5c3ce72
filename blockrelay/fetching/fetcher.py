"""Block fetching from the indexer."""

import json
import logging

from google.protobuf import text_format

from blockrelay.errors import EnvelopeDecodeError, HeightMismatchError, PayloadDecodeError
from blockrelay.protocol import Block, block_height_of
from blockrelay.types import BlockHeight
from .client import IndexerClient

logger = logging.getLogger(__name__)


def decode_envelope(body: bytes) -> str:
    """Unwrap the JSON string the indexer wraps payloads in."""
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise EnvelopeDecodeError(f"failed to unmarshal JSON response: {e}") from e
    if not isinstance(payload, str):
        raise EnvelopeDecodeError(f"expected a JSON string, got {type(payload).__name__}")
    return payload


def decode_block(payload: str) -> Block:
    """Parse a protobuf text-format block."""
    block = Block()
    try:
        text_format.Parse(payload, block)
    except text_format.ParseError as e:
        raise PayloadDecodeError(f"failed to unmarshal protobuf text: {e}") from e
    return block


class BlockFetcher:
    """Fetches and decodes single blocks using an IndexerClient."""
    
    def __init__(self, client: IndexerClient):
        self.client = client
    
    async def fetch(self, height: BlockHeight) -> Block:
        """
        Fetch the block at `height`.
        
        Raises a FetchError subclass on any failure; a returned block always
        carries the requested height.
        """
        body = await self.client.get_block_details_raw(height)
        block = decode_block(decode_envelope(body))
        
        received = block_height_of(block)
        if received != height:
            raise HeightMismatchError(height, received)
        
        logger.info(f"Fetched block {height} ({len(block.transactions)} transactions)")
        return block
