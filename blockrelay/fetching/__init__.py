"""Block fetching from the indexer."""

from .client import DEFAULT_INDEXER_URL, IndexerClient
from .fetcher import BlockFetcher, decode_block, decode_envelope

__all__ = ["BlockFetcher", "DEFAULT_INDEXER_URL", "IndexerClient", "decode_block", "decode_envelope"]
