"""In-memory backends for unit tests — dict-backed fakes that record calls."""

from __future__ import annotations

import copy
import uuid
from typing import Any

from extsqs.core.types import AttributeMap, RawMessage


class MemoryObjectStore:
    """Dict-backed IObjectStore; a missing key raises ``KeyError``."""

    def __init__(self) -> None:
        self._objects: dict[tuple[str, str], bytes] = {}
        self.encodings: dict[tuple[str, str], str | None] = {}
        self.gets: list[tuple[str, str]] = []
        self.puts: list[tuple[str, str]] = []

    def get(self, bucket: str, key: str) -> bytes:
        self.gets.append((bucket, key))
        return self._objects[(bucket, key)]

    def put(self, bucket: str, key: str, data: bytes,
            content_encoding: str | None = None) -> dict[str, Any]:
        self.puts.append((bucket, key))
        self._objects[(bucket, key)] = bytes(data)
        self.encodings[(bucket, key)] = content_encoding
        return {"Bucket": bucket, "Key": key}

    @property
    def calls(self) -> int:
        return len(self.gets) + len(self.puts)


class MemoryQueueTransport:
    """List-backed IQueueTransport; received messages stay queued until removed."""

    def __init__(self) -> None:
        self._queues: dict[str, list[RawMessage]] = {}
        self.sent: list[dict[str, Any]] = []
        self.receives: list[dict[str, Any]] = []

    def get_queue_url(self, name: str) -> str:
        return f"memory://{name}"

    def send(self, queue_url: str, body: str, attributes: AttributeMap,
             group_id: str | None = None, dedup_id: str | None = None) -> dict[str, Any]:
        message_id = str(uuid.uuid4())
        self.sent.append({
            "queue_url": queue_url, "body": body, "attributes": copy.deepcopy(attributes),
            "group_id": group_id, "dedup_id": dedup_id,
        })
        self._queues.setdefault(queue_url, []).append({
            "MessageId": message_id,
            "ReceiptHandle": f"rh-{message_id}",
            "Body": body,
            "MessageAttributes": copy.deepcopy(attributes),
        })
        return {"MessageId": message_id}

    def receive(self, queue_url: str, max_messages: int, wait_seconds: int,
                visibility_timeout: int, attribute_names: list[str]) -> list[RawMessage]:
        self.receives.append({
            "queue_url": queue_url, "max_messages": max_messages, "wait_seconds": wait_seconds,
            "visibility_timeout": visibility_timeout, "attribute_names": list(attribute_names),
        })
        return [copy.deepcopy(m) for m in self._queues.get(queue_url, [])[:max_messages]]

    def enqueue(self, queue_url: str, message: RawMessage) -> None:
        """Place a raw message on a queue as if another producer had sent it."""
        self._queues.setdefault(queue_url, []).append(message)

    @property
    def calls(self) -> int:
        return len(self.sent) + len(self.receives)
