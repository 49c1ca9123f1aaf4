"""Gzip codec for message bodies."""

from __future__ import annotations

import gzip
import zlib

NO_COMPRESSION = zlib.Z_NO_COMPRESSION
DEFAULT_COMPRESSION = zlib.Z_DEFAULT_COMPRESSION


class GzipCodec:
    """ICodec producing gzip streams; a fixed mtime keeps output deterministic."""

    content_encoding = "gzip"

    def compress(self, data: bytes, level: int = DEFAULT_COMPRESSION) -> bytes:
        return gzip.compress(data, compresslevel=level, mtime=0)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)
