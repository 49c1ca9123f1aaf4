"""Object store backends behind the IObjectStore protocol."""

from __future__ import annotations

from extsqs.persistence.memory_backend import MemoryObjectStore
from extsqs.persistence.s3_backend import S3ObjectStore

__all__ = ["MemoryObjectStore", "S3ObjectStore"]
