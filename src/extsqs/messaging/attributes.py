"""Reserved pointer attributes marking a body as stored in the overflow bucket.

Both attributes present means the body is a pointer; anything else is an
inline body. The pair is the wire contract with existing consumers, so it is
decoded into ``InlineBody | OverflowPointer`` here and nowhere else.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from extsqs.core.types import AttributeMap
from extsqs.messaging.models import BodyLocation, InlineBody, OverflowPointer

BUCKET_ATTRIBUTE = "EXTENDED_STORE_BUCKET"
KEY_ATTRIBUTE = "EXTENDED_STORE_KEY"
POINTER_ATTRIBUTES = (BUCKET_ATTRIBUTE, KEY_ATTRIBUTE)

# Overflowed messages carry this body instead of the payload.
OVERFLOW_SENTINEL = "true"


def strip_pointer(attributes: Mapping[str, Any] | None) -> AttributeMap:
    """Copy of ``attributes`` without the reserved pointer names."""
    return {k: v for k, v in (attributes or {}).items() if k not in POINTER_ATTRIBUTES}


def tag_pointer(attributes: Mapping[str, Any] | None, bucket: str, key: str) -> AttributeMap:
    """Copy of ``attributes`` carrying a pointer to ``bucket``/``key``."""
    tagged = strip_pointer(attributes)
    tagged[BUCKET_ATTRIBUTE] = {"DataType": "String", "StringValue": bucket}
    tagged[KEY_ATTRIBUTE] = {"DataType": "String", "StringValue": key}
    return tagged


def _string_value(attributes: Mapping[str, Any], name: str, field: str) -> str | None:
    value = attributes.get(name)
    if not isinstance(value, Mapping):
        return None
    return value.get(field) or None


def read_pointer(body: str, attributes: Mapping[str, Any] | None,
                 field: str = "StringValue") -> BodyLocation:
    """Decode where a received body lives.

    ``field`` names the string member of an attribute value: ``StringValue``
    for SQS receive responses, ``stringValue`` for Lambda event records.
    """
    attributes = attributes or {}
    bucket = _string_value(attributes, BUCKET_ATTRIBUTE, field)
    key = _string_value(attributes, KEY_ATTRIBUTE, field)
    if bucket and key:
        return OverflowPointer(bucket=bucket, key=key)
    return InlineBody(body=body)
