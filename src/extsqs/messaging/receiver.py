"""Extended receiver: fetch overflowed bodies, decompress, and parse received messages."""

from __future__ import annotations

import base64
import binascii
import json
import logging
import zlib
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any

from extsqs.core.exceptions import MessageDecodeError, ResolutionTimeoutError
from extsqs.core.protocols import ICodec, IObjectStore, IQueueTransport
from extsqs.core.types import RawMessage
from extsqs.messaging.attributes import POINTER_ATTRIBUTES, read_pointer
from extsqs.messaging.codec import GzipCodec
from extsqs.messaging.models import BodyLocation, OverflowPointer, Resolution

logger = logging.getLogger(__name__)


class ExtendedReceiver:
    """Resolves received messages whether their body is inline or overflowed."""

    def __init__(
        self,
        transport: IQueueTransport,
        store: IObjectStore,
        *,
        codec: ICodec | None = None,
        wait_seconds: int = 20,
        default_visibility_timeout: int = 300,
        max_workers: int = 10,
    ) -> None:
        self._transport = transport
        self._store = store
        self._codec = codec or GzipCodec()
        self._wait_seconds = wait_seconds
        self._default_visibility_timeout = default_visibility_timeout
        self._max_workers = max_workers

    # ---- decode pipeline ----

    def _load(self, location: BodyLocation) -> bytes:
        if isinstance(location, OverflowPointer):
            return self._store.get(location.bucket, location.key)
        try:
            return base64.b64decode(location.body, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MessageDecodeError("base64 decode", str(exc)) from exc

    def _decode(self, data: bytes) -> Any:
        try:
            raw = self._codec.decompress(data)
        except (OSError, EOFError, zlib.error) as exc:
            raise MessageDecodeError("decompress", str(exc)) from exc
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise MessageDecodeError("parse", str(exc)) from exc

    def resolve(self, message: RawMessage) -> Resolution:
        """Decode one SQS receive-response message; errors propagate."""
        location = read_pointer(message.get("Body", ""), message.get("MessageAttributes"))
        return Resolution(message=message, body=self._decode(self._load(location)))

    def _resolve_isolated(self, message: RawMessage) -> Resolution:
        try:
            return self.resolve(message)
        except Exception as exc:
            logger.warning("Failed to resolve message %s", message.get("MessageId"), exc_info=True)
            return Resolution(message=message, error=exc)

    def resolve_delivered(self, message: dict[str, Any]) -> Resolution:
        """Decode a message delivered by a Lambda trigger (camelCase fields).

        There is no batch to protect, so failures raise.
        """
        location = read_pointer(
            message.get("body", ""), message.get("messageAttributes"), field="stringValue",
        )
        return Resolution(message=message, body=self._decode(self._load(location)))

    # ---- batch ----

    def resolve_batch(self, messages: list[RawMessage],
                      timeout: float | None = None) -> list[Resolution]:
        """Resolve every message concurrently; one Resolution per message, in order."""
        if not messages:
            return []

        results: list[Resolution | None] = [None] * len(messages)

        def run(index: int, message: RawMessage) -> None:
            results[index] = self._resolve_isolated(message)

        pool = ThreadPoolExecutor(max_workers=min(len(messages), self._max_workers))
        try:
            futures = [pool.submit(run, i, m) for i, m in enumerate(messages)]
            _, pending = wait(futures, timeout=timeout)
            for future in pending:
                future.cancel()
        finally:
            pool.shutdown(wait=False, cancel_futures=True)

        # Snapshot so a straggling task cannot write into the returned list.
        return [
            result if result is not None else Resolution(
                message=message,
                error=ResolutionTimeoutError(f"not resolved within {timeout}s"),
            )
            for result, message in zip(list(results), messages)
        ]

    def extended_retrieve(
        self,
        queue_name: str,
        max_messages: int = 10,
        attribute_names: list[str] | None = None,
        visibility_timeout: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Resolution]:
        names = list(attribute_names or [])
        names += [n for n in POINTER_ATTRIBUTES if n not in names]
        messages = self._transport.receive(
            self._transport.get_queue_url(queue_name),
            max_messages,
            self._wait_seconds,
            visibility_timeout or self._default_visibility_timeout,
            names,
        )
        return self.resolve_batch(messages, timeout=timeout)
