# pixel.py
"""
RGBA pixels and an in-memory pixel buffer.

A pixel's text form is "#rrggbb" with an optional ".aa" alpha suffix; the
alpha defaults to 255. The buffer is a numpy array of shape
(height, width, 4), addressed by (x, y) from the top-left corner. Encoding
it to an image file is left to the caller.
"""
import re
import numpy as np
from typing import Iterator, Optional, Union

import constants as const
from errors import ArgumentOutOfRange, InvalidCoordinate, InvalidDimension, InvalidPixelFormat
from utils import is_integer

_PIXEL_PATTERN = re.compile(r"#([0-9a-f]{6})(?:\.([0-9a-f]{2}))?", re.IGNORECASE)


def _check_channel(name: str, value: int) -> int:
    if not (is_integer(value) and 0 <= value <= 255):
        raise ArgumentOutOfRange(f'expected unsigned byte for {name}, got "{value}"')
    return int(value)


class Pixel:
    """A single RGBA pixel with 8-bit channels."""

    __slots__ = ("red", "green", "blue", "alpha")

    def __init__(self, red: int, green: int, blue: int, alpha: int = 255):
        self.red = _check_channel("red", red)
        self.green = _check_channel("green", green)
        self.blue = _check_channel("blue", blue)
        self.alpha = _check_channel("alpha", alpha)

    @classmethod
    def parse(cls, text: str) -> "Pixel":
        """Parses '#rrggbb' or '#rrggbb.aa' (hex digits in either case)."""
        match = _PIXEL_PATTERN.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidPixelFormat(f'invalid pixel string "{text}"')
        rgb, alpha = match.groups()
        return cls(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            255 if alpha is None else int(alpha, 16),
        )

    @classmethod
    def coerce(cls, value: Union["Pixel", str]) -> "Pixel":
        """Accepts a Pixel or its text form."""
        if isinstance(value, Pixel):
            return value
        return cls.parse(value)

    def as_tuple(self):
        return (self.red, self.green, self.blue, self.alpha)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __eq__(self, other):
        if isinstance(other, Pixel):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self):
        return hash(self.as_tuple())

    def __str__(self) -> str:
        text = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.alpha != 255:
            text += f".{self.alpha:02x}"
        return text

    def __repr__(self) -> str:
        return f"Pixel({self.red}, {self.green}, {self.blue}, {self.alpha})"


class PixelBuffer:
    """A mutable width x height image of Pixels."""

    def __init__(self, width: int, height: int, fill: Optional[Union[Pixel, str]] = None):
        if not (is_integer(width) and is_integer(height)) or width < 1 or height < 1:
            raise InvalidDimension(
                f"expected an image of size at least 1x1, got {width}x{height}"
            )
        self._data = np.zeros((int(height), int(width), 4), dtype=np.uint8)
        if fill is not None:
            self.clear(fill)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    def _check(self, x: int, y: int):
        if not (is_integer(x) and is_integer(y) and 0 <= x < self.width and 0 <= y < self.height):
            raise InvalidCoordinate(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check(x, y)
        return Pixel(*(int(v) for v in self._data[y, x]))

    def put_pixel(self, x: int, y: int, pixel: Union[Pixel, str]):
        self._check(x, y)
        self._data[y, x] = Pixel.coerce(pixel).as_tuple()

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, pixel: Union[Pixel, str]):
        """Fills the half-open rectangle [x0, x1) x [y0, y1), clipped to the image."""
        x0, y0 = max(0, x0), max(0, y0)
        x1, y1 = min(self.width, x1), min(self.height, y1)
        if x0 < x1 and y0 < y1:
            self._data[y0:y1, x0:x1] = Pixel.coerce(pixel).as_tuple()

    def clear(self, fill: Union[Pixel, str] = const.DEFAULT_CLEAR_COLOR):
        """Sets every pixel to `fill` (white by default)."""
        self._data[:, :] = Pixel.coerce(fill).as_tuple()

    def to_array(self) -> np.ndarray:
        """Returns a copy of the pixels as a (height, width, 4) uint8 array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
