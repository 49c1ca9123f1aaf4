"""Queue client wiring the SQS transport, S3 store, and extended sender/receiver."""

from __future__ import annotations

from typing import Any

from extsqs.core.config import AppSettings
from extsqs.core.logging import configure_logging
from extsqs.core.types import AttributeMap, RawMessage
from extsqs.messaging.models import Resolution, SendResult
from extsqs.messaging.receiver import ExtendedReceiver
from extsqs.messaging.sender import ExtendedSender, stringify
from extsqs.persistence.s3_backend import S3ObjectStore
from extsqs.transport.sqs_backend import SQSQueueTransport


class ExtendedQueueClient:
    """Queue operations by name, plain and extended."""

    def __init__(
        self,
        *,
        settings: AppSettings,
        transport: SQSQueueTransport,
        sender: ExtendedSender,
        receiver: ExtendedReceiver,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._sender = sender
        self._receiver = receiver

    def get_queue_url(self, name: str) -> str:
        return self._transport.get_queue_url(name)

    def list_queues(self) -> list[str]:
        return self._transport.list_queues()

    def purge(self, queue_name: str) -> dict[str, Any]:
        return self._transport.purge(self.get_queue_url(queue_name))

    def remove(self, queue_name: str, entries: list[dict[str, str]]) -> dict[str, Any]:
        return self._transport.delete_batch(self.get_queue_url(queue_name), entries)

    def set_visibility_timeout(self, queue_name: str, handle: str, timeout: int) -> dict[str, Any]:
        return self._transport.change_visibility(self.get_queue_url(queue_name), handle, timeout)

    def send(self, queue_name: str, payload: Any, attributes: AttributeMap | None = None,
             *, message_group_id: str | None = None,
             message_deduplication_id: str | None = None) -> dict[str, Any]:
        """Send ``payload`` as-is (JSON text if not a str), without compression."""
        return self._transport.send(
            self.get_queue_url(queue_name), stringify(payload), dict(attributes or {}),
            group_id=message_group_id, dedup_id=message_deduplication_id,
        )

    def retrieve(self, queue_name: str, max_messages: int = 10,
                 attribute_names: list[str] | None = None,
                 visibility_timeout: int | None = None) -> list[RawMessage]:
        """Receive raw messages without decoding them."""
        sqs = self._settings.sqs
        return self._transport.receive(
            self.get_queue_url(queue_name),
            max_messages,
            sqs.long_polling_wait_time,
            visibility_timeout or sqs.default_visibility_timeout,
            list(attribute_names or []),
        )

    def extended_send(self, queue_name: str, payload: Any,
                      attributes: AttributeMap | None = None, **kwargs: Any) -> SendResult:
        return self._sender.send(queue_name, payload, attributes, **kwargs)

    def extended_retrieve(self, queue_name: str, max_messages: int = 10,
                          attribute_names: list[str] | None = None,
                          visibility_timeout: int | None = None,
                          *, timeout: float | None = None) -> list[Resolution]:
        return self._receiver.extended_retrieve(
            queue_name, max_messages, attribute_names, visibility_timeout, timeout=timeout,
        )

    def resolve_delivered(self, message: dict[str, Any]) -> Resolution:
        return self._receiver.resolve_delivered(message)


def create_client(settings: AppSettings | None = None) -> ExtendedQueueClient:
    """Create a wired-up queue client from application settings."""
    if settings is None:
        settings = AppSettings()
    configure_logging(settings.log_level)

    transport = SQSQueueTransport(sqs=settings.sqs, aws=settings.aws)
    store = S3ObjectStore(aws=settings.aws, endpoint_url=settings.s3.endpoint_url)

    sender = ExtendedSender(
        transport,
        store,
        default_bucket=settings.s3.bucket,
        shards=settings.extended.shards,
        max_message_size=settings.extended.max_message_size,
        max_uncompressed_size=settings.extended.max_uncompressed_size,
    )
    receiver = ExtendedReceiver(
        transport,
        store,
        wait_seconds=settings.sqs.long_polling_wait_time,
        default_visibility_timeout=settings.sqs.default_visibility_timeout,
        max_workers=settings.extended.max_workers,
    )
    return ExtendedQueueClient(
        settings=settings, transport=transport, sender=sender, receiver=receiver,
    )
