"""Exception hierarchy for the block relay."""

from typing import Optional


class BlockRelayError(Exception):
    """Base exception for block relay errors."""


class ConfigurationError(BlockRelayError):
    """Required configuration missing or malformed."""


# ===================
# Fetching
# ===================

class FetchError(BlockRelayError):
    """Base exception for indexer fetch errors."""


class HTTPStatusError(FetchError):
    """Indexer answered with a non-success status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"request failed with status {status}: {body}")
        self.status = status
        self.body = body


class EnvelopeDecodeError(FetchError):
    """Response body is not a JSON string."""


class PayloadDecodeError(FetchError):
    """Inner text-format payload could not be decoded into a block."""


class HeightMismatchError(FetchError):
    """Indexer returned a block for a different height."""

    def __init__(self, requested: int, received: int):
        super().__init__(f"requested block {requested} but indexer returned block {received}")
        self.requested = requested
        self.received = received


class FetchTransportError(FetchError):
    """Connection, DNS or other transport failure."""


class FetchTimeoutError(FetchError):
    """Indexer did not answer in time."""


# ===================
# Relaying
# ===================

class RelayError(BlockRelayError):
    """Base exception for validator relay errors."""


class RelayConnectionError(RelayError):
    """Validator could not be reached."""


class RelayTimeoutError(RelayError):
    """Broadcast deadline expired."""


class RemoteError(RelayError):
    """Broadcast call returned an error status."""

    def __init__(self, code: str, details: Optional[str] = None):
        message = f"broadcast failed with {code}"
        if details:
            message += f": {details}"
        super().__init__(message)
        self.code = code
        self.details = details
