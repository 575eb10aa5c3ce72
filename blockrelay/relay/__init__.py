"""Block relaying to validators."""

from .client import ValidatorClient
from .relayer import BROADCAST_TIMEOUT, BlockRelay

__all__ = ["BROADCAST_TIMEOUT", "BlockRelay", "ValidatorClient"]
