"""Description of the individual image formats stored in ICNS files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .core import magic_to_str


class FormatType(Enum):
    """Encoding family of an ICNS image format."""

    UNKNOWN = auto()
    BIT_1 = auto()
    BIT_1_WITH_MASK = auto()
    BIT_4 = auto()
    BIT_8 = auto()
    BIT_24 = auto()
    BIT_8_MASK = auto()
    BIT_24_OR_PNG = auto()  # or JPEG 2000
    PNG = auto()  # or JPEG 2000
    ARGB_OR_PNG = auto()


@dataclass(frozen=True)
class IcnsFormat:
    """Metadata for one ICNS image format."""

    magic: int
    name: str
    iconset: str | None
    type: FormatType
    width: int
    height: int
    factor: int = 1
    macos_ver: int = 0

    @property
    def real_width(self) -> int:
        """Width in pixels, including the retina factor."""
        return self.width * self.factor

    @property
    def real_height(self) -> int:
        """Height in pixels, including the retina factor."""
        return self.height * self.factor

    @property
    def magic_name(self) -> str:
        """The four-character code as text."""
        return magic_to_str(self.magic)