"""extsqs exception hierarchy.

AWS transport and store failures are not wrapped: botocore's ``ClientError``
reaches the caller as raised so it can apply its own retry policy.
"""

from __future__ import annotations


class ExtSQSError(Exception):
    """Base exception for all extsqs errors."""


class ConfigurationError(ExtSQSError):
    """Required configuration is missing or invalid."""


class PayloadEncodingError(ExtSQSError):
    """Payload could not be serialized to a string."""


class CompressionError(ExtSQSError):
    """Payload could not be compressed."""


class MessageDecodeError(ExtSQSError):
    """A received body could not be decoded, decompressed, or parsed."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"{stage} failed: {message}")


class ResolutionTimeoutError(ExtSQSError):
    """Batch resolution ran out of time before this message resolved."""


class QueryFailedError(ExtSQSError):
    """Athena query execution reached a failed terminal state."""

    def __init__(self, execution_id: str, state: str, reason: str | None = None) -> None:
        self.execution_id = execution_id
        self.state = state
        self.reason = reason
        super().__init__(f"Query {execution_id} {state.lower()}: {reason}")


class QueryTimeoutError(ExtSQSError):
    """Athena query did not finish within the allotted wait."""


class UnsupportedColumnTypeError(ExtSQSError):
    """Athena result column has a type that cannot be converted."""
