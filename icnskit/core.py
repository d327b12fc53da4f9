"""Shared constants, error type and chunk header for ICNS handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

UINT32_MAX = 0xFFFFFFFF


class ErrorCode(IntEnum):
    """Result codes used throughout the package."""

    OK = 0
    # Acceptable in some situations.
    NO_IMAGE = auto()
    IMAGE_EXISTS_FOR_FORMAT = auto()
    # Always an error.
    INTERNAL_ERROR = auto()
    READ_OPEN_ERROR = auto()
    READ_ERROR = auto()
    WRITE_OPEN_ERROR = auto()
    WRITE_ERROR = auto()
    FILESYSTEM_ERROR = auto()
    ALLOC_ERROR = auto()
    DATA_ERROR = auto()
    INVALID_DIMENSIONS = auto()
    UNKNOWN_CHUNK = auto()
    UNIMPLEMENTED_FORMAT = auto()
    PNG_INIT_ERROR = auto()
    PNG_READ_ERROR = auto()
    PNG_WRITE_ERROR = auto()
    PNG_NOT_A_PNG = auto()
    PNG_NOT_1_BIT_COLOR = auto()
    PNG_NOT_1_BIT_COLOR_MASK = auto()
    PNG_NOT_IN_PALETTE = auto()

    @property
    def is_error(self) -> bool:
        """True for codes that always indicate failure."""
        return self >= ErrorCode.INTERNAL_ERROR


class IcnsError(Exception):
    """Raised when an ICNS operation fails."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message
        text = f"{self.code.name}: {message}" if message else self.code.name
        super().__init__(text)


class State(Enum):
    """Processing state of a loaded image set."""

    INIT = auto()
    LOADING = auto()
    PREPARED_FOR_EXTERNAL = auto()
    PREPARED_FOR_ICNS = auto()
    HOLDING_ICNS_SIZE = auto()
    HOLDING_ICONSET_SIZE = auto()
    HOLDING_EXTERNAL_SIZE = auto()


class TargetType(Enum):
    """Kind of container an image is read from or written to."""

    EXTERNAL = auto()
    ICONSET = auto()
    ICNS = auto()


def _byte_value(part: int | str) -> int:
    if isinstance(part, str):
        if len(part) != 1:
            raise ValueError(f"magic component must be one character: {part!r}")
        part = ord(part)
    if not 0 <= part <= 0xFF:
        raise ValueError(f"magic component out of byte range: {part}")
    return part


def magic(a: int | str, b: int | str, c: int | str, d: int | str) -> int:
    """Build a big-endian four-character code from characters or byte values."""
    return int.from_bytes(bytes(_byte_value(x) for x in (a, b, c, d)), "big")


def magic_to_str(value: int) -> str:
    """Render a four-character code as text, one character per byte."""
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"magic out of 32-bit range: {value}")
    return value.to_bytes(4, "big").decode("latin-1")


@dataclass(frozen=True)
class ChunkHeader:
    """An ICNS chunk header: four-character code and total length."""

    magic: int
    length: int

    def __post_init__(self) -> None:
        if not 0 <= self.magic <= UINT32_MAX:
            raise IcnsError(ErrorCode.DATA_ERROR, f"chunk magic out of range: {self.magic}")
        if not 0 <= self.length <= UINT32_MAX:
            raise IcnsError(ErrorCode.DATA_ERROR, f"chunk length out of range: {self.length}")