"""Extended sender: compress, overflow to the object store when too large, send."""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Mapping
from typing import Any

from extsqs.core.exceptions import CompressionError, ConfigurationError, PayloadEncodingError
from extsqs.core.protocols import ICodec, IObjectStore, IQueueTransport
from extsqs.messaging.attributes import OVERFLOW_SENTINEL, strip_pointer, tag_pointer
from extsqs.messaging.codec import DEFAULT_COMPRESSION, NO_COMPRESSION, GzipCodec
from extsqs.messaging.keys import DEFAULT_SHARDS, shard_key
from extsqs.messaging.models import SendResult
from extsqs.messaging.sizing import compute_message_size

logger = logging.getLogger(__name__)

MAX_MESSAGE_SIZE = 262_085
MAX_UNCOMPRESSED_SIZE = 65_486


def stringify(payload: Any) -> str:
    """Return ``payload`` unchanged if it is a str, else its JSON text."""
    if isinstance(payload, str):
        return payload
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as exc:
        raise PayloadEncodingError(f"payload is not JSON serializable: {exc}") from exc


class ExtendedSender:
    """Sends payloads of any size through a capped queue transport."""

    def __init__(
        self,
        transport: IQueueTransport,
        store: IObjectStore,
        *,
        codec: ICodec | None = None,
        default_bucket: str | None = None,
        shards: int = DEFAULT_SHARDS,
        max_message_size: int = MAX_MESSAGE_SIZE,
        max_uncompressed_size: int = MAX_UNCOMPRESSED_SIZE,
    ) -> None:
        self._transport = transport
        self._store = store
        self._codec = codec or GzipCodec()
        self._default_bucket = default_bucket
        self._shards = shards
        self._max_message_size = max_message_size
        self._max_uncompressed_size = max_uncompressed_size

    def compression_level(self, payload: str, attributes: Mapping[str, Any]) -> int:
        size = compute_message_size(payload, attributes, include_body=True)
        if size < self._max_uncompressed_size:
            return NO_COMPRESSION
        return DEFAULT_COMPRESSION

    def send(
        self,
        queue_name: str,
        payload: Any,
        attributes: Mapping[str, Any] | None = None,
        *,
        bucket: str | None = None,
        message_group_id: str | None = None,
        message_deduplication_id: str | None = None,
        shards: int | None = None,
    ) -> SendResult:
        bucket = bucket or self._default_bucket
        if not bucket:
            raise ConfigurationError("S3 bucket name required for extended send")

        text = stringify(payload)
        attrs = strip_pointer(attributes)

        level = self.compression_level(text, attrs)
        try:
            data = self._codec.compress(text.encode("utf-8"), level)
        except Exception as exc:
            raise CompressionError(f"compression failed: {exc}") from exc

        size = compute_message_size(data, attrs, include_body=True)
        logger.debug("Message to %s: level=%d compressed_size=%d", queue_name, level, size)

        key = None
        if size > self._max_message_size:
            key = shard_key(shards if shards is not None else self._shards)
            self._store.put(bucket, key, data, content_encoding="gzip")
            logger.info("Overflowed %d bytes to s3://%s%s", len(data), bucket, key)
            attrs = tag_pointer(attrs, bucket, key)
            body = OVERFLOW_SENTINEL
        else:
            body = base64.b64encode(data).decode("ascii")

        response = self._transport.send(
            self._transport.get_queue_url(queue_name),
            body,
            attrs,
            group_id=message_group_id,
            dedup_id=message_deduplication_id,
        )
        return SendResult(
            response=response or {},
            extended=key is not None,
            bucket=bucket if key else None,
            key=key,
        )
