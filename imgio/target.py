"""Output targets that image data is written to."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Protocol

__all__ = ["Writer", "FileTarget", "MemoryTarget", "Target"]


class Writer(Protocol):
    def setup(self, extension: str) -> None: ...

    def write(self, data: bytes) -> int: ...

    def read(self, size: int) -> bytes: ...

    def seek(self, offset: int, whence: int) -> int: ...

    def end(self) -> None: ...


class FileTarget:
    """Writes output to a file that is opened when the target is set up."""

    def __init__(self, filename: str | Path) -> None:
        self.filename = Path(filename)
        self.extension: str | None = None
        self._file: BinaryIO | None = None

    def setup(self, extension: str) -> None:
        self.extension = extension
        self._file = open(self.filename, "wb")

    def write(self, data: bytes) -> int:
        if self._file is None:
            raise RuntimeError("file target has not been set up")
        return self._file.write(data)

    def _describe(self) -> str:
        state = "open" if self._file is not None else "not open"
        return f"file target {self.filename} ({state})"

    def read(self, size: int) -> bytes:
        raise io.UnsupportedOperation(
            f"cannot read {size} bytes: {self._describe()} is write-only"
        )

    def seek(self, offset: int, whence: int) -> int:
        raise io.UnsupportedOperation(
            f"cannot seek to {offset} (whence={whence}): "
            f"{self._describe()} is not seekable"
        )

    def end(self) -> None:
        if self._file is None:
            raise RuntimeError("file target has not been set up")
        self._file.close()
        self._file = None


class MemoryTarget:
    """Appends output to a caller-supplied bytearray, or discards it if none."""

    def __init__(self, memory: bytearray | None) -> None:
        self.memory = memory
        self.extension: str | None = None
        self.ended = False

    def setup(self, extension: str) -> None:
        self.extension = extension
        self.ended = False

    def write(self, data: bytes) -> int:
        if self.memory is None:
            return 0
        self.memory += data
        return len(data)

    def _describe(self) -> str:
        if self.memory is None:
            return "memory target (discarding output)"
        return f"memory target (holding {len(self.memory)} bytes)"

    def read(self, size: int) -> bytes:
        raise io.UnsupportedOperation(
            f"cannot read {size} bytes: {self._describe()} is write-only"
        )

    def seek(self, offset: int, whence: int) -> int:
        raise io.UnsupportedOperation(
            f"cannot seek to {offset} (whence={whence}): "
            f"{self._describe()} is not seekable"
        )

    def end(self) -> None:
        self.ended = True


class Target:
    """A handle to the writer that receives the processed image."""

    def __init__(self, writer: Writer) -> None:
        self._writer = writer

    @classmethod
    def to_writer(cls, writer: Writer) -> Target:
        return cls(writer)

    @classmethod
    def to_file(cls, filename: str | Path) -> Target:
        return cls(FileTarget(filename))

    @classmethod
    def to_memory(cls, memory: bytearray | None) -> Target:
        return cls(MemoryTarget(memory))

    def setup(self, extension: str) -> None:
        self._writer.setup(extension)

    def write(self, data: bytes) -> int:
        return self._writer.write(data)

    def end(self) -> None:
        self._writer.end()