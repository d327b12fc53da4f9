"""Byte streams for reading and writing ICNS data.

A stream is opened for reading or writing, never both. It reads from a
callback, a memory buffer or a file, and counts the bytes that pass through it.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import BinaryIO

from .core import UINT32_MAX, ChunkHeader, ErrorCode, IcnsError

Reader = Callable[[int], bytes]
Writer = Callable[[bytes], int]

CHUNK_HEADER_SIZE = 8


class IoType(Enum):
    """Kind of backing store a stream is attached to."""

    NONE = auto()
    CALLBACK = auto()
    FILE = auto()
    MEMORY = auto()


def put_u32be(value: int) -> bytes:
    """Encode an unsigned 32-bit value as four big-endian bytes."""
    if not 0 <= value <= UINT32_MAX:
        raise IcnsError(ErrorCode.DATA_ERROR, f"value out of 32-bit range: {value}")
    return value.to_bytes(4, "big")


def get_u32be(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Decode an unsigned 32-bit big-endian value starting at ``offset``."""
    chunk = bytes(data[offset : offset + 4])
    if offset < 0 or len(chunk) != 4:
        raise IcnsError(ErrorCode.DATA_ERROR, f"not enough data at offset {offset}")
    return int.from_bytes(chunk, "big")


class IcnsStream:
    """A one-way byte stream over a callback, memory buffer or file."""

    def __init__(self) -> None:
        self._io_type = IoType.NONE
        self._reader: Reader | None = None
        self._writer: Writer | None = None
        self._file: BinaryIO | None = None
        self._buffer: bytes | bytearray | memoryview | None = None
        self._position = 0
        self._size = 0
        self._bytes_in = 0
        self._bytes_out = 0

    # State inspection

    @property
    def io_type(self) -> IoType:
        """What the stream is currently attached to."""
        return self._io_type

    @property
    def reader(self) -> Reader | None:
        """The active read callback, or None when not reading."""
        return self._reader

    @property
    def writer(self) -> Writer | None:
        """The active write callback, or None when not writing."""
        return self._writer

    @property
    def buffer(self) -> bytes | bytearray | memoryview | None:
        """The memory buffer in use, for memory streams."""
        return self._buffer

    @property
    def position(self) -> int:
        """Cursor within the memory buffer."""
        return self._position

    @property
    def size(self) -> int:
        """Size of the memory buffer."""
        return self._size

    @property
    def bytes_in(self) -> int:
        """Bytes read since the stream was opened."""
        return self._bytes_in

    @property
    def bytes_out(self) -> int:
        """Bytes written since the stream was opened."""
        return self._bytes_out

    # Opening

    def _check_idle(self, opening: str) -> None:
        if self._reader is not None:
            if opening == "read":
                raise IcnsError(ErrorCode.INTERNAL_ERROR, "read function already set")
            raise IcnsError(
                ErrorCode.INTERNAL_ERROR, "can't set write function--already in read mode"
            )
        if self._writer is not None:
            if opening == "write":
                raise IcnsError(ErrorCode.INTERNAL_ERROR, "write function already set")
            raise IcnsError(
                ErrorCode.INTERNAL_ERROR, "can't set read function--already in write mode"
            )

    def init_read(self, reader: Reader) -> None:
        """Open for reading through ``reader(count) -> bytes``."""
        self._check_idle("read")
        self._io_type = IoType.CALLBACK
        self._reader = reader
        self._bytes_in = 0

    def init_write(self, writer: Writer) -> None:
        """Open for writing through ``writer(data) -> bytes written``."""
        self._check_idle("write")
        self._io_type = IoType.CALLBACK
        self._writer = writer
        self._bytes_out = 0

    def _read_memory(self, count: int) -> bytes:
        if self._buffer is None or self._position >= self._size:
            return b""
        count = min(count, self._size - self._position)
        chunk = bytes(self._buffer[self._position : self._position + count])
        self._position += count
        return chunk

    def _write_memory(self, data: bytes) -> int:
        if self._buffer is None or self._position >= self._size:
            return 0
        count = min(len(data), self._size - self._position)
        self._buffer[self._position : self._position + count] = data[:count]
        self._position += count
        return count

    def init_read_memory(self, data: bytes | bytearray | memoryview) -> None:
        """Open for reading from an in-memory buffer."""
        self.init_read(self._read_memory)
        self._io_type = IoType.MEMORY
        self._buffer = data
        self._position = 0
        self._size = len(data)

    def init_write_memory(self, buffer: bytearray | memoryview) -> None:
        """Open for writing into a fixed-size writable buffer."""
        self.init_write(self._write_memory)
        self._io_type = IoType.MEMORY
        self._buffer = buffer
        self._position = 0
        self._size = len(buffer)

    def _read_file(self, count: int) -> bytes:
        if self._file is None or count <= 0:
            return b""
        return self._file.read(count)

    def _write_file(self, data: bytes) -> int:
        if self._file is None or not data:
            return 0
        return self._file.write(data)

    def init_read_file(self, path: str | bytes) -> None:
        """Open for reading from the file at ``path``."""
        self.init_read(self._read_file)
        try:
            self._file = open(path, "rb")
        except OSError as exc:
            self.end()
            raise IcnsError(
                ErrorCode.READ_OPEN_ERROR, f"failed to open file '{path!s}': {exc}"
            ) from exc
        self._io_type = IoType.FILE

    def init_write_file(self, path: str | bytes) -> None:
        """Open for writing to the file at ``path``, replacing its contents."""
        self.init_write(self._write_file)
        try:
            self._file = open(path, "wb")
        except OSError as exc:
            self.end()
            raise IcnsError(
                ErrorCode.WRITE_OPEN_ERROR,
                f"failed to open file '{path!s}' for write: {exc}",
            ) from exc
        self._io_type = IoType.FILE

    def end(self) -> None:
        """Close the stream and return it to its idle state."""
        if self._file is not None:
            self._file.close()
            self._file = None
        self._io_type = IoType.NONE
        self._reader = None
        self._writer = None
        self._buffer = None
        self._position = 0
        self._size = 0
        self._bytes_in = 0
        self._bytes_out = 0

    def __enter__(self) -> IcnsStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()

    # Transfer

    def read_direct(self, count: int) -> bytes:
        """Read exactly ``count`` bytes or raise READ_ERROR."""
        if self._reader is None:
            raise IcnsError(ErrorCode.INTERNAL_ERROR, "reader is not set")
        if count < 0:
            raise ValueError(f"negative read count: {count}")
        chunk = bytes(self._reader(count))[:count] if count else b""
        self._bytes_in += len(chunk)
        if len(chunk) < count:
            raise IcnsError(ErrorCode.READ_ERROR, "failed to read file into buffer")
        return chunk

    def load_direct(self, count: int) -> bytearray:
        """Read exactly ``count`` bytes into a newly allocated mutable buffer."""
        return bytearray(self.read_direct(count))

    def write_direct(self, data: bytes | bytearray | memoryview) -> None:
        """Write all of ``data`` or raise WRITE_ERROR."""
        if self._writer is None:
            raise IcnsError(ErrorCode.INTERNAL_ERROR, "writer is not set")
        payload = bytes(data)
        count_out = self._writer(payload) if payload else 0
        self._bytes_out += count_out
        if count_out < len(payload):
            raise IcnsError(ErrorCode.WRITE_ERROR, f"write of size {len(payload)} failed")

    def read_chunk_header(self) -> ChunkHeader:
        """Read an 8-byte chunk header."""
        raw = self.read_direct(CHUNK_HEADER_SIZE)
        return ChunkHeader(get_u32be(raw, 0), get_u32be(raw, 4))

    def write_chunk_header(self, header: ChunkHeader) -> None:
        """Write an 8-byte chunk header."""
        raw = put_u32be(header.magic) + put_u32be(header.length)
        try:
            self.write_direct(raw)
        except IcnsError as exc:
            raise IcnsError(
                exc.code,
                f"failed to write chunk header: {header.magic:08x} {header.length}",
            ) from exc