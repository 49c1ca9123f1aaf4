"""Shared test doubles — re-export memory backends and stub codecs."""

from __future__ import annotations

from extsqs.messaging.codec import GzipCodec
from extsqs.persistence.memory_backend import MemoryObjectStore, MemoryQueueTransport


class RecordingCodec(GzipCodec):
    """Real gzip codec that records every call and the levels it was asked for."""

    def __init__(self) -> None:
        self.levels: list[int] = []
        self.decompressed = 0

    def compress(self, data: bytes, level: int = -1) -> bytes:
        self.levels.append(level)
        return super().compress(data, level)

    def decompress(self, data: bytes) -> bytes:
        self.decompressed += 1
        return super().decompress(data)

    @property
    def calls(self) -> int:
        return len(self.levels) + self.decompressed


class FixedSizeCodec:
    """Codec whose output is always ``size`` bytes, for threshold tests."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.levels: list[int] = []

    def compress(self, data: bytes, level: int) -> bytes:
        self.levels.append(level)
        return b"x" * self.size

    def decompress(self, data: bytes) -> bytes:
        return b"{}"


__all__ = ["FixedSizeCodec", "MemoryObjectStore", "MemoryQueueTransport", "RecordingCodec"]
