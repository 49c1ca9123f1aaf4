"""Queue transports behind the IQueueTransport protocol."""

from __future__ import annotations

from extsqs.persistence.memory_backend import MemoryQueueTransport
from extsqs.transport.sqs_backend import SQSQueueTransport

__all__ = ["MemoryQueueTransport", "SQSQueueTransport"]
