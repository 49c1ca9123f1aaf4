"""Extended SQS messaging: compressed bodies with S3 overflow for large payloads."""

from __future__ import annotations

from extsqs.client import ExtendedQueueClient, create_client
from extsqs.messaging.models import Resolution, SendResult

__all__ = ["ExtendedQueueClient", "Resolution", "SendResult", "create_client"]
