"""Images held for individual formats and the ordered set that owns them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .core import ErrorCode, IcnsError
from .formats import IcnsFormat


@dataclass
class RgbaColor:
    """One RGBA pixel with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


def luma_for_pixel(pixel: RgbaColor) -> int:
    """Apparent brightness of a pixel, ignoring its alpha channel."""
    total = pixel.r * 306 + pixel.g * 601 + pixel.b * 117
    return (total + 512) // 1024


@dataclass(eq=False)
class IcnsImage:
    """Image data for a single format; may hold pixels, raw, PNG or JPEG 2000 data."""

    format: IcnsFormat | None
    real_width: int | None = None
    real_height: int | None = None
    pixels: list[RgbaColor] | None = None
    data: bytes | None = None
    png: bytes | None = None
    jp2: bytes | None = None

    def __post_init__(self) -> None:
        if self.format is not None:
            if self.real_width is None:
                self.real_width = self.format.real_width
            if self.real_height is None:
                self.real_height = self.format.real_height
        if self.real_width is None:
            self.real_width = 0
        if self.real_height is None:
            self.real_height = 0

    @property
    def is_raw(self) -> bool:
        """True if raw ICNS chunk data is loaded."""
        return self.data is not None

    @property
    def is_pixels(self) -> bool:
        """True if a decoded pixel array is loaded."""
        return self.pixels is not None

    @property
    def is_png(self) -> bool:
        """True if PNG data is loaded."""
        return self.png is not None

    @property
    def is_jpeg_2000(self) -> bool:
        """True if JPEG 2000 data is loaded."""
        return self.jp2 is not None

    @property
    def data_size(self) -> int:
        return len(self.data) if self.data is not None else 0

    @property
    def png_size(self) -> int:
        return len(self.png) if self.png is not None else 0

    @property
    def jp2_size(self) -> int:
        return len(self.jp2) if self.jp2 is not None else 0

    def clear(self) -> None:
        """Drop all loaded image data, keeping the format and dimensions."""
        self.pixels = None
        self.data = None
        self.png = None
        self.jp2 = None

    def allocate_pixel_array(self) -> list[RgbaColor]:
        """Return a new zeroed pixel array sized for this image's format.

        The image itself is not modified.
        """
        if self.format is None:
            raise IcnsError(ErrorCode.INTERNAL_ERROR, "image has no format")
        count = self.format.real_width * self.format.real_height
        return [RgbaColor() for _ in range(count)]


class ImageSet:
    """Ordered collection holding at most one image per format."""

    def __init__(self) -> None:
        self._images: list[IcnsImage] = []

    def __iter__(self) -> Iterator[IcnsImage]:
        return iter(list(self._images))

    def __len__(self) -> int:
        return len(self._images)

    @property
    def head(self) -> IcnsImage | None:
        """First image in the set, or None when empty."""
        return self._images[0] if self._images else None

    @property
    def tail(self) -> IcnsImage | None:
        """Last image in the set, or None when empty."""
        return self._images[-1] if self._images else None

    def get_image_by_format(self, format: IcnsFormat) -> IcnsImage | None:
        """Return the image stored for ``format``, or None."""
        return next((img for img in self._images if img.format is format), None)

    def add_image_for_format(
        self, format: IcnsFormat, insert_after: IcnsImage | None = None
    ) -> tuple[IcnsImage, bool]:
        """Add an image for ``format`` unless one exists.

        Returns the new or existing image and whether it was created. The new
        image goes after ``insert_after``, or at the end when that is None.
        """
        existing = self.get_image_by_format(format)
        if existing is not None:
            return existing, False

        if insert_after is None:
            position = len(self._images)
        else:
            try:
                position = self._images.index(insert_after) + 1
            except ValueError:
                raise IcnsError(
                    ErrorCode.INTERNAL_ERROR,
                    "image to insert this image after does not exist in image set",
                ) from None

        image = IcnsImage(format)
        self._images.insert(position, image)
        return image, True

    def delete_image_by_format(self, format: IcnsFormat) -> bool:
        """Remove and clear the image for ``format``; False if there was none."""
        image = self.get_image_by_format(format)
        if image is None:
            return False
        self._images.remove(image)
        image.clear()
        return True

    def delete_all_images(self) -> None:
        """Remove and clear every image in the set."""
        for image in self._images:
            image.clear()
        self._images.clear()