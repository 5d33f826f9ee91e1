"""
Raster module.

A :py:class:`Raster` is a single fixed-size RGBA pixel buffer, the unit a
layered image is built from. Pixels are stored in a NumPy array of shape
``(height, width, 4)`` and exposed as :py:class:`~layered_raster.api.color.Color`
values.

Example usage::

    from layered_raster.api.raster import Raster

    raster = Raster(4, 3)
    raster.set_pixel_color(0, 0, (255, 0, 0, 255))
    raster.draw_line(0, 2, 3, 0, (0, 0, 255, 128))
    raster.convolve([[0, 0, 0], [0, 1, 0], [0, 0, 0]])

    merged = Raster.over(raster, Raster(4, 3, (255, 255, 255, 255)))
"""

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from layered_raster.api.color import Color
from layered_raster.composite import blend, draw, filters
from layered_raster.constants import CHANNELS, TRANSPARENT

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

ColorLike = Union[Color, Sequence[int]]


class Raster:
    """
    Fixed-size 2-D buffer of RGBA pixels.

    :param width: Number of columns, must be positive.
    :param height: Number of rows, must be positive.
    :param color: Initial color of every pixel. Default is fully transparent.
    """

    def __init__(self, width: int, height: int, color: ColorLike = TRANSPARENT):
        _check_size(width, height)
        self._data: NDArray[np.uint8] = np.empty((height, width, CHANNELS), np.uint8)
        self.clear(color)

    @classmethod
    def fromarray(cls, array: NDArray[Any]) -> "Raster":
        """
        Create a raster from a ``(height, width, 4)`` array of 8-bit values.

        The array is copied.

        :raises TypeError: If the array does not hold integers.
        :raises ValueError: If the shape or the values are out of range.
        """
        array = np.asarray(array)
        if not np.issubdtype(array.dtype, np.integer):
            raise TypeError(f"Expected an integer array, got dtype {array.dtype}")
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError(f"Expected (height, width, 4) array, got {array.shape}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError("Array values must be in range [0, 255]")
        height, width = array.shape[:2]
        _check_size(width, height)
        raster = cls.__new__(cls)
        raster._data = array.astype(np.uint8, copy=True)
        return raster

    @classmethod
    def frompil(cls, image: "Image.Image") -> "Raster":
        """
        Create a raster from a PIL Image.

        :param image: Any PIL Image; it is converted to RGBA.
        """
        from layered_raster.api import pil_io

        return cls.fromarray(pil_io.image_to_array(image))

    @property
    def width(self) -> int:
        """Width of the raster."""
        return self._data.shape[1]

    @property
    def height(self) -> int:
        """Height of the raster."""
        return self._data.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def clear(self, color: ColorLike) -> None:
        """Set every pixel to `color`."""
        self._data[:, :] = Color.coerce(color).astuple()

    def get_pixel_color(self, x: int, y: int) -> Color:
        """
        Color of the pixel at (x, y).

        :raises IndexError: If (x, y) is outside the raster.
        :raises TypeError: If a coordinate is not an int.
        """
        self._check_coordinate(x, y)
        return Color.coerce(self._data[y, x])

    def set_pixel_color(self, x: int, y: int, color: ColorLike) -> None:
        """
        Replace the color of the pixel at (x, y).

        :raises IndexError: If (x, y) is outside the raster.
        :raises TypeError: If `color` is None or a coordinate is not an int.
        """
        value = Color.coerce(color)
        self._check_coordinate(x, y)
        self._data[y, x] = value.astuple()

    def crop(self, width: int, height: int) -> None:
        """
        Keep the top-left `width` x `height` region and discard the rest.

        :raises ValueError: If the new size is not positive or exceeds the
            current size.
        """
        self.check_crop(width, height)
        self._data = self._data[:height, :width].copy()

    def check_crop(self, width: int, height: int) -> None:
        """Raise :exc:`ValueError` if the raster cannot be cropped to the size."""
        _check_size(width, height)
        if width > self.width or height > self.height:
            raise ValueError(
                f"Cannot crop {self.width}x{self.height} raster to {width}x{height}"
            )

    def draw_line(
        self, x1: int, y1: int, x2: int, y2: int, color: ColorLike
    ) -> None:
        """
        Draw a line from (x1, y1) to (x2, y2) using the Bresenham algorithm.

        Pixels on the line are replaced by `color`, no blending takes place.

        :raises IndexError: If an endpoint is outside the raster.
        :raises TypeError: If `color` is None.
        """
        value = Color.coerce(color).astuple()
        self._check_coordinate(x1, y1)
        self._check_coordinate(x2, y2)
        for x, y in draw.bresenham(x1, y1, x2, y2):
            self._data[y, x] = value

    def convolve(self, kernel: filters.KernelLike) -> None:
        """
        Filter the color channels with a square kernel of odd side.

        Alpha is preserved and borders repeat the nearest edge pixel. See
        :py:mod:`layered_raster.composite.filters`.

        :raises ValueError: If the kernel is malformed or not smaller than
            the raster.
        """
        array = filters.check_kernel(kernel, self.width, self.height)
        self._data = filters.convolve(self._data, array)

    @staticmethod
    def over(top: "Raster", bottom: "Raster") -> "Raster":
        """
        Porter-Duff over of two rasters of the same size.

        Neither input is modified.

        :raises ValueError: If the sizes differ.
        """
        if top.size != bottom.size:
            raise ValueError(
                f"Cannot composite rasters of different sizes: {top.size} vs {bottom.size}"
            )
        return Raster.fromarray(blend.over(top._data, bottom._data))

    @staticmethod
    def over_pixel(top: ColorLike, bottom: ColorLike) -> Color:
        """Porter-Duff over of two colors."""
        top_array = np.array(Color.coerce(top).astuple(), np.uint8)
        bottom_array = np.array(Color.coerce(bottom).astuple(), np.uint8)
        return Color.coerce(blend.over(top_array, bottom_array))

    def copy(self) -> "Raster":
        return Raster.fromarray(self._data)

    def numpy(self) -> NDArray[np.uint8]:
        """
        Get a copy of the pixels as a ``(height, width, 4)`` uint8 array.
        """
        return self._data.copy()

    def topil(self) -> "Image.Image":
        """
        Get an RGBA PIL Image of the raster.
        """
        from layered_raster.api import pil_io

        return pil_io.array_to_image(self._data)

    def _check_coordinate(self, x: int, y: int) -> None:
        for name, value in (("x", x), ("y", y)):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Coordinate ({x}, {y}) is outside the {self.width}x{self.height} raster"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(size=%dx%d)" % (self.__class__.__name__, self.width, self.height)


def _check_size(width: Optional[int], height: Optional[int]) -> None:
    for name, value in (("width", width), ("height", height)):
        if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
