"""Building blocks for ICNS icon data: chunk streams, image sets, formats, JPEG 2000 detection and filesystem helpers."""

__version__ = "0.1.0"

__all__ = ["core", "filesystem", "formats", "image", "jp2", "stream"]