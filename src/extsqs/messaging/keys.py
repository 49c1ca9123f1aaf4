"""Sharded object keys for overflowed message bodies."""

from __future__ import annotations

import random
import uuid

from extsqs.core.exceptions import ConfigurationError

DEFAULT_SHARDS = 50
OBJECT_SUFFIX = "json.gz"


def shard_key(shards: int = DEFAULT_SHARDS) -> str:
    """Return ``/{shard}/{uuid4}.json.gz`` with shard drawn uniformly from [0, shards)."""
    if shards < 1:
        raise ConfigurationError(f"shard count must be positive, got {shards!r}")
    return f"/{random.randrange(shards)}/{uuid.uuid4()}.{OBJECT_SUFFIX}"
