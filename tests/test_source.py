import pytest

from imgio.source import READ_CHUNK_SIZE, Source, UnreadableImageError


class StringReader:
    def __init__(self, data: bytes, chunk: int | None = None) -> None:
        self.data = data
        self.pos = 0
        self.chunk = chunk
        self.sizes = []

    def read(self, size: int) -> bytes:
        self.sizes.append(size)
        if self.chunk is not None:
            size = min(size, self.chunk)
        out = self.data[self.pos:self.pos + size]
        self.pos += len(out)
        return out


class UnreadableReader:
    def read(self, size: int) -> bytes:
        raise OSError("cannot read")


def test_unreadable_reader_raises():
    with pytest.raises(UnreadableImageError, match="read error while buffering image"):
        Source.from_reader(UnreadableReader())


def test_invalid_source_reader_buffers_content():
    source = Source.from_reader(StringReader(b"<!DOCTYPE html>"))
    assert source.buffer == b"<!DOCTYPE html>"


def test_reader_is_asked_for_chunk_size():
    reader = StringReader(b"abc")
    Source.from_reader(reader)
    assert reader.sizes and all(size == READ_CHUNK_SIZE for size in reader.sizes)


def test_reader_with_small_chunks_collects_everything():
    data = bytes(range(256)) * 40
    source = Source.from_reader(StringReader(data, chunk=7))
    assert source.buffer == data


def test_reader_larger_than_chunk_size():
    data = b"x" * (READ_CHUNK_SIZE * 3 + 5)
    source = Source.from_reader(StringReader(data))
    assert source.buffer == data


def test_empty_reader_gives_empty_buffer():
    assert Source.from_reader(StringReader(b"")).buffer == b""


def test_from_buffer_text():
    assert Source.from_buffer("<!DOCTYPE html>").buffer == b"<!DOCTYPE html>"


def test_from_buffer_bytes_copy():
    data = bytearray(b"GIF89a")
    source = Source.from_buffer(data)
    data[0] = 0
    assert source.buffer == b"GIF89a"


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "image.bin"
    data = bytes(range(256))
    path.write_bytes(data)
    assert Source.from_file(path).buffer == data
    assert Source.from_file(str(path)).buffer == data


def test_from_missing_file_is_empty(tmp_path):
    assert Source.from_file(tmp_path / "doesnotexist.jpg").buffer == b""