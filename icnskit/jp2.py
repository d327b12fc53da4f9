"""Detection of JPEG 2000 data."""

from __future__ import annotations

_CODESTREAM_MAGIC = bytes((0xFF, 0x4F, 0xFF, 0x51))

_CONTAINER_MAGIC = bytes(
    (0x00, 0x00, 0x00, 0x0C, 0x6A, 0x50, 0x20, 0x20, 0x0D, 0x0A, 0x87, 0x0A)
)


def is_file_jp2(data: bytes | bytearray | memoryview) -> bool:
    """Return True if the buffer starts like a JPEG 2000 file or codestream."""
    head = bytes(data[: len(_CONTAINER_MAGIC)])
    return head.startswith(_CODESTREAM_MAGIC) or head.startswith(_CONTAINER_MAGIC)