"""Protocol interfaces for the extsqs collaborators.

The messaging core only talks to these Protocols; boto3 backends and the
in-memory fakes both satisfy them structurally.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from extsqs.core.types import AttributeMap, RawMessage


# ---------------------------------------------------------------------------
# Queue transport
# ---------------------------------------------------------------------------

@runtime_checkable
class IQueueTransport(Protocol):
    """SQS-compatible send/receive primitives."""

    def get_queue_url(self, name: str) -> str: ...

    def send(
        self,
        queue_url: str,
        body: str,
        attributes: AttributeMap,
        group_id: str | None = None,
        dedup_id: str | None = None,
    ) -> dict[str, Any]: ...

    def receive(
        self,
        queue_url: str,
        max_messages: int,
        wait_seconds: int,
        visibility_timeout: int,
        attribute_names: list[str],
    ) -> list[RawMessage]: ...


# ---------------------------------------------------------------------------
# Object store
# ---------------------------------------------------------------------------

@runtime_checkable
class IObjectStore(Protocol):
    """S3-compatible key-addressed object storage."""

    def get(self, bucket: str, key: str) -> bytes: ...

    def put(self, bucket: str, key: str, data: bytes,
            content_encoding: str | None = None) -> dict[str, Any]: ...


# ---------------------------------------------------------------------------
# Compression
# ---------------------------------------------------------------------------

@runtime_checkable
class ICodec(Protocol):
    """Reversible byte compression with a selectable level."""

    def compress(self, data: bytes, level: int) -> bytes: ...

    def decompress(self, data: bytes) -> bytes: ...
