# imgio

Small building blocks for getting image bytes into and out of an image
processing pipeline.

- `imgio.source.Source` holds a whole input image in memory, gathered from a
  reader object, a file on disk or a buffer.
- `imgio.target.Target` passes encoded output on to a writer object, a file
  or a `bytearray` in memory.

## Reading input

`Source` is a frozen dataclass with a single field, `buffer` (bytes).

```python
from imgio.source import Source, UnreadableImageError

src = Source.from_buffer(b"\x89PNG...")   # bytes, bytearray, memoryview
src = Source.from_buffer("<svg/>")        # text is encoded as UTF-8
src = Source.from_file("photo.jpg")
print(len(src.buffer))
```

`Source.from_file` reads the file's content. A file that cannot be opened
gives a source with an empty buffer rather than an error.

`Source.from_reader` takes any object with a `read(size)` method. It calls
`read` with chunks of `READ_CHUNK_SIZE` (4096) bytes until the reader returns
an empty result, and joins everything into one buffer. If `read` raises
`OSError`, `UnreadableImageError` is raised with the message
`"read error while buffering image"`.

```python
import io

src = Source.from_reader(io.BytesIO(b"GIF89a..."))

class Broken:
    def read(self, size):
        raise OSError("connection lost")

try:
    Source.from_reader(Broken())
except UnreadableImageError as exc:
    print(exc)
```

## Writing output

```python
from imgio.target import Target

out = bytearray()
target = Target.to_memory(out)
target.setup(".png")
target.write(b"...encoded image...")   # returns the number of bytes taken
target.end()

target = Target.to_file("result.jpg")
target.setup(".jpg")                   # opens the file for writing
target.write(b"...")
target.end()                           # closes the file
```

`Target` forwards `setup`, `write` and `end` to the writer it wraps:

- `Target.to_memory(memory)` uses a `MemoryTarget`, which appends to the
  given `bytearray`. With `None` the output is discarded and `write`
  returns 0.
- `Target.to_file(filename)` uses a `FileTarget`. The file is opened in
  `setup`; calling `write` or `end` before `setup` raises `RuntimeError`.
- `Target.to_writer(writer)` wraps any object with `setup`, `write`, `read`,
  `seek` and `end` methods (the `imgio.target.Writer` protocol).

Both `FileTarget` and `MemoryTarget` are write-only: their `read` and `seek`
methods raise `io.UnsupportedOperation`. Each records the extension passed to
`setup` in its `extension` attribute; `MemoryTarget` also sets `ended` to
`True` once `end` is called.

## What this package does not do

It only moves bytes. It does not decode, inspect, transform or encode
images, and it has no command-line tool or server; those are left to the
pipeline that uses these sources and targets.

## Tests

The test suite uses pytest, which the `test` extra installs.