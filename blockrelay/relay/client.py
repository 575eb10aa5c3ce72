"""gRPC client for a validator's ValidatorService."""

import asyncio
import logging
from typing import Optional

import grpc

from blockrelay.errors import RelayConnectionError, RelayTimeoutError, RemoteError
from blockrelay.protocol import BROADCAST_METHOD, Block, Empty
from blockrelay.types import Endpoint

logger = logging.getLogger(__name__)


class ValidatorClient:
    """
    Plaintext gRPC client for one validator.
    
    Use as an async context manager; the channel lives exactly as long as
    the `async with` block.
    """
    
    def __init__(self, endpoint: Endpoint):
        self.endpoint = endpoint
        self._channel: Optional[grpc.aio.Channel] = None
        self._broadcast: Optional[grpc.aio.UnaryUnaryMultiCallable] = None
    
    async def connect(self) -> None:
        try:
            self._channel = grpc.aio.insecure_channel(self.endpoint.target)
        except (ValueError, RuntimeError) as e:
            raise RelayConnectionError(f"failed to connect to gRPC server {self.endpoint}: {e}") from e
        self._broadcast = self._channel.unary_unary(
            BROADCAST_METHOD,
            request_serializer=Block.SerializeToString,
            response_deserializer=Empty.FromString,
        )
        logger.debug(f"Opened channel to {self.endpoint}")
    
    async def close(self) -> None:
        if self._channel:
            await self._channel.close()
            self._channel = None
            self._broadcast = None
            logger.debug(f"Closed channel to {self.endpoint}")
    
    async def __aenter__(self):
        await self.connect()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    async def broadcast(self, block: Block, timeout: float) -> Empty:
        """
        Send `block` through ValidatorService.Broadcast within `timeout` seconds.
        
        The deadline covers both reaching the validator and the call itself.
        Only failing to reach the validator is a RelayConnectionError; any
        status the Broadcast call returns is a RemoteError.
        """
        if not self._broadcast:
            raise RelayConnectionError(f"not connected to {self.endpoint}")
        
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        try:
            await asyncio.wait_for(self._channel.channel_ready(), timeout)
        except asyncio.TimeoutError as e:
            raise RelayConnectionError(f"failed to connect to gRPC server {self.endpoint} within {timeout}s") from e
        
        remaining = deadline - loop.time()
        if remaining <= 0:
            raise RelayTimeoutError(f"{self.endpoint} did not answer within {timeout}s")
        
        try:
            return await self._broadcast(block, timeout=remaining)
        except grpc.aio.AioRpcError as e:
            code = e.code()
            if code == grpc.StatusCode.DEADLINE_EXCEEDED:
                raise RelayTimeoutError(f"{self.endpoint} did not answer within {timeout}s") from e
            raise RemoteError(code.name, e.details()) from e
