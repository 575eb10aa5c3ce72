"""Validator wire schema (blocks and the ValidatorService)."""

from .schema import (
    BROADCAST_METHOD,
    SERVICE_NAME,
    Block,
    BlockHeader,
    Empty,
    Transaction,
    add_validator_service_to_server,
    block_height_of,
)

__all__ = [
    "BROADCAST_METHOD",
    "SERVICE_NAME",
    "Block",
    "BlockHeader",
    "Empty",
    "Transaction",
    "add_validator_service_to_server",
    "block_height_of",
]
