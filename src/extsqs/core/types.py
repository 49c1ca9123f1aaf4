"""Type aliases used across extsqs."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
AttributeValue = dict[str, Any]
AttributeMap = dict[str, AttributeValue]
RawMessage = dict[str, Any]
QueueUrl = str
