"""Image input sources that hold their whole content in memory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

__all__ = ["UnreadableImageError", "Source", "READ_CHUNK_SIZE"]

READ_CHUNK_SIZE = 4096


class UnreadableImageError(Exception):
    """Raised when image data cannot be read from its origin."""


class Reader(Protocol):
    def read(self, size: int) -> bytes: ...


@dataclass(frozen=True)
class Source:
    """An image source backed by an in-memory byte buffer."""

    buffer: bytes = b""

    @classmethod
    def from_reader(cls, reader: Reader) -> Source:
        """Buffer everything a reader yields until it returns no more data.

        The reader's ``read(size)`` returns up to ``size`` bytes, an empty
        result at the end of the data, and raises ``OSError`` on failure.
        """
        collected = bytearray()

        def next_chunk() -> bytes:
            try:
                chunk = reader.read(READ_CHUNK_SIZE)
            except OSError as exc:
                raise UnreadableImageError(
                    "read error while buffering image"
                ) from exc
            return bytes(chunk) if chunk else b""

        for chunk in iter(next_chunk, b""):
            collected += chunk
        return cls(bytes(collected))

    @classmethod
    def from_file(cls, filename: str | Path) -> Source:
        """Load a file's content; a file that cannot be opened gives an empty source."""
        try:
            data = Path(filename).read_bytes()
        except OSError:
            data = b""
        return cls(data)

    @classmethod
    def from_buffer(cls, buffer: bytes | bytearray | memoryview | str) -> Source:
        """Wrap an area of memory; text is encoded as UTF-8."""
        if isinstance(buffer, str):
            return cls(buffer.encode("utf-8"))
        return cls(bytes(buffer))