"""HTTP client for the Zera indexer."""

import asyncio
import logging
from typing import Dict

import aiohttp
import async_timeout

from blockrelay.errors import (
    ConfigurationError,
    FetchTimeoutError,
    FetchTransportError,
    HTTPStatusError,
)
from blockrelay.types import BlockHeight

logger = logging.getLogger(__name__)

DEFAULT_INDEXER_URL = "https://indexer.zera.vision"
DEFAULT_TIMEOUT = 5.0


class IndexerClient:
    """
    Async client for the indexer's store API.
    
    Every call is a single attempt inside its own session; nothing is kept
    between calls.
    """
    
    def __init__(self, credential: str, base_url: str = DEFAULT_INDEXER_URL, timeout: float = DEFAULT_TIMEOUT):
        if not credential:
            raise ConfigurationError("INDEXER_AUTH environment variable not set")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._credential = credential
    
    def __repr__(self) -> str:
        return f"IndexerClient(base_url={self.base_url!r}, timeout={self.timeout})"
    
    def _get_headers(self) -> Dict[str, str]:
        return {"Target": "indexer", "authorization": self._credential}
    
    async def get_block_details_raw(self, height: BlockHeight) -> bytes:
        """POST getBlockDetailsRaw for one height and return the raw response body."""
        url = f"{self.base_url}/store"
        params = {"requestType": "getBlockDetailsRaw", "blockHeight": str(height)}
        
        logger.debug(f"Requesting block {height} from {url}")
        try:
            async with async_timeout.timeout(self.timeout):
                async with aiohttp.ClientSession() as session:
                    async with session.post(url, params=params, headers=self._get_headers()) as response:
                        body = await response.read()
                        if not 200 <= response.status < 300:
                            raise HTTPStatusError(response.status, body.decode("utf-8", errors="replace"))
        except asyncio.TimeoutError as e:
            raise FetchTimeoutError(f"indexer did not answer within {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise FetchTransportError(f"error making request: {e}") from e
        
        logger.debug(f"Indexer returned {len(body)} bytes for block {height}")
        return body
