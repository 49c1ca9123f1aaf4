"""Extended-message protocol: sizing, compression, overflow pointers, send and resolve."""

from __future__ import annotations

from extsqs.messaging.attributes import BUCKET_ATTRIBUTE, KEY_ATTRIBUTE
from extsqs.messaging.models import InlineBody, OverflowPointer, Resolution, SendResult
from extsqs.messaging.receiver import ExtendedReceiver
from extsqs.messaging.sender import ExtendedSender

__all__ = [
    "BUCKET_ATTRIBUTE",
    "ExtendedReceiver",
    "ExtendedSender",
    "InlineBody",
    "KEY_ATTRIBUTE",
    "OverflowPointer",
    "Resolution",
    "SendResult",
]
