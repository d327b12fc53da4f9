# icnskit

Building blocks for working with Apple ICNS icon files and `.iconset`
directories. The package provides chunk-level stream I/O, an ordered set of
images keyed by format, JPEG 2000 detection and a few filesystem helpers.

## Installation

```
pip install icnskit
```

To run the tests:

```
pip install "icnskit[test]"
pytest
```

## Modules

### `icnskit.core`

- `ErrorCode`: an `IntEnum` of result codes. Its `is_error` property is true
  for codes from `INTERNAL_ERROR` onwards; `NO_IMAGE` and
  `IMAGE_EXISTS_FOR_FORMAT` are not errors.
- `IcnsError`: the exception raised by failing operations. Its `code`
  attribute holds the `ErrorCode` and `message` the detail text.
- `State` and `TargetType`: enums for processing state and for the kind of
  container (`EXTERNAL`, `ICONSET`, `ICNS`).
- `ChunkHeader(magic, length)`: a frozen dataclass. Values outside the
  unsigned 32-bit range raise `IcnsError` with `DATA_ERROR`.
- `magic(a, b, c, d)`: builds a big-endian four-character code from single
  characters or byte values. `magic_to_str(value)` turns it back into text.

### `icnskit.formats`

- `FormatType`: the encoding family of a format.
- `IcnsFormat`: a frozen dataclass with `magic`, `name`, `iconset`, `type`,
  `width`, `height`, `factor` (default 1) and `macos_ver`. The properties
  `real_width` and `real_height` multiply the size by the factor, and
  `magic_name` gives the four-character code as text.

### `icnskit.image`

- `RgbaColor`: one pixel with `r`, `g`, `b`, `a` channels.
- `luma_for_pixel(pixel)`: apparent brightness, computed as
  `(306*r + 601*g + 117*b + 512) // 1024`.
- `IcnsImage`: image data for one format. It may hold `pixels`, raw `data`,
  `png` or `jp2` bytes. The properties `is_raw`, `is_pixels`, `is_png` and
  `is_jpeg_2000` report which of these are loaded, and `data_size`,
  `png_size` and `jp2_size` give their lengths. `clear()` drops all loaded
  data and keeps the format and dimensions. `allocate_pixel_array()` returns
  a new zeroed pixel list sized for the format and does not change the image.
- `ImageSet`: an ordered collection with at most one image per format.
  Formats are matched by identity.
  - `add_image_for_format(format, insert_after=None)` returns
    `(image, created)`. When an image for the format already exists it is
    returned with `created` set to `False`. An `insert_after` image that is
    not in the set raises `IcnsError` with `INTERNAL_ERROR`.
  - `get_image_by_format(format)` returns the image or `None`.
  - `delete_image_by_format(format)` returns `False` if the set has no image
    for that format.
  - `delete_all_images()` empties the set.
  - `head` and `tail` give the first and last images. The set also supports
    iteration and `len()`.

### `icnskit.stream`

- `IcnsStream`: a one-way byte stream. Open it with exactly one of these
  methods:
  - `init_read(reader)`: reads through a callback, `reader(count) -> bytes`.
  - `init_write(writer)`: writes through a callback,
    `writer(data) -> int`, which returns the number of bytes written.
  - `init_read_memory(data)`: reads from an in-memory buffer.
  - `init_write_memory(buffer)`: writes into a fixed-size writable buffer.
  - `init_read_file(path)` and `init_write_file(path)`: read from or write
    to a file.

  Opening a stream that is already open raises `IcnsError` with
  `INTERNAL_ERROR`. A file that cannot be opened raises `READ_OPEN_ERROR` or
  `WRITE_OPEN_ERROR` and leaves the stream idle.

  The transfer methods are `read_direct(count)`, `load_direct(count)` (which
  returns a `bytearray`), `write_direct(data)`, `read_chunk_header()` and
  `write_chunk_header(header)`. A short read raises `READ_ERROR` and a short
  write raises `WRITE_ERROR`. The stream exposes `io_type`, `bytes_in`,
  `bytes_out`, `position` and `size`. `end()` closes the stream and resets
  it; the stream is also a context manager that calls `end()` on exit.
- `IoType`: what the stream is attached to (`NONE`, `CALLBACK`, `FILE`,
  `MEMORY`).
- `put_u32be(value)` and `get_u32be(data, offset=0)`: encode and decode
  big-endian unsigned 32-bit values.

### `icnskit.filesystem`

- `get_file_type(path)`: returns a `FileType` (`NOTEXIST`, `REG`, `DIR`,
  `OTHER`). Symbolic links are followed.
- `chdir(path)`, `getcwd()`, `mkdir(path)` and `unlink(path)`: failures
  raise `IcnsError` with `FILESYSTEM_ERROR`. `mkdir` fails if the path
  already exists, and `unlink` does not remove directories.
- `read_directory(path)`: returns a list of `DirEntry(name, type)` and
  leaves out `.` and `..`.

### `icnskit.jp2`

- `is_file_jp2(data)`: true if the buffer starts with a JPEG 2000 codestream
  marker or the JP2 container signature.

## Example

```python
from icnskit.core import ChunkHeader, magic
from icnskit.stream import IcnsStream

buffer = bytearray(8)
with IcnsStream() as stream:
    stream.init_write_memory(buffer)
    stream.write_chunk_header(ChunkHeader(magic(*b"it32"), 0x01020304))

with IcnsStream() as stream:
    stream.init_read_memory(bytes(buffer))
    header = stream.read_chunk_header()
    assert header.length == 0x01020304
```

## What it does not do

icnskit has no command-line tool. It has no table of the real ICNS formats
and does not convert between image encodings: it does not decode or encode
PNG, JPEG 2000, or the 1-, 4-, 8- and 24-bit chunk formats. It also does not
read or write a whole `.icns` file or `.iconset` directory by itself. The
modules above supply the pieces such a converter is built from.