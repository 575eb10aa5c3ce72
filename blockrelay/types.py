"""
Core types for the block relay.

Block records themselves are protobuf messages, see blockrelay.protocol.
"""

from dataclasses import dataclass

# Position of a block in the ledger
BlockHeight = int

DEFAULT_GRPC_PORT = 50051


@dataclass(frozen=True)
class Endpoint:
    """Validator gRPC target."""
    host: str
    port: int = DEFAULT_GRPC_PORT
    
    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"
    
    def __str__(self) -> str:
        return self.target
