"""
Layered image module.

This module provides the main :py:class:`LayeredImage` class, the primary
entry point of layered-raster. It owns a
:py:class:`~layered_raster.api.layers.LayerStack` and forwards edits to the
active layer, while queries composite the whole stack without changing it.

Key functionality:

- **Layers**: :py:meth:`~LayeredImage.new_layer`,
  :py:meth:`~LayeredImage.set_active_layer`, :py:meth:`~LayeredImage.remove_layer`
- **Editing the active layer**: pixels, lines and convolution filters
- **Compositing**: :py:meth:`~LayeredImage.get_pixel_color` and
  :py:meth:`~LayeredImage.as_flat_image`
- **Conversion**: :py:meth:`~LayeredImage.topil`, :py:meth:`~LayeredImage.numpy`
  and :py:meth:`~LayeredImage.frompil`

Example usage::

    from layered_raster import LayeredImage

    image = LayeredImage(2, 2)          # opaque black background
    image.new_layer()                   # transparent layer, now active
    image.set_pixel_color(0, 0, (0, 0, 255, 128))

    image.get_pixel_color(0, 0)         # Color(red=0, green=0, blue=128, alpha=255)
    image.as_flat_image().topil().save('output.png')

    # Iterate through layers from top to bottom
    for layer in image:
        print(layer)
"""

import logging
from typing import TYPE_CHECKING, Iterator

import numpy as np
from numpy.typing import NDArray

from layered_raster.api.color import Color
from layered_raster.api.layers import LayerStack
from layered_raster.api.raster import ColorLike, Raster
from layered_raster.composite.filters import KernelLike
from layered_raster.constants import OPAQUE_BLACK, TRANSPARENT

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)


class LayeredImage:
    """
    Image made of equally sized RGBA layers with one active layer.

    The image starts with a single opaque black background layer at index 0,
    which can never be removed. Layers are not handed out: iteration yields
    copies and compositing returns new rasters.

    :param width: Width in pixels, must be positive.
    :param height: Height in pixels, must be positive.
    """

    def __init__(self, width: int, height: int):
        self._init(LayerStack(Raster(width, height, OPAQUE_BLACK)))

    @classmethod
    def frompil(cls, image: "Image.Image") -> "LayeredImage":
        """
        Create a layered image with a PIL Image as the background layer.

        :param image: Any PIL Image; it is converted to RGBA.
        """
        layered = cls.__new__(cls)
        layered._init(LayerStack(Raster.frompil(image)))
        return layered

    def _init(self, stack: LayerStack) -> None:
        self._stack = stack
        self._width = stack.width
        self._height = stack.height

    @property
    def width(self) -> int:
        """Width of the image."""
        return self._width

    @property
    def height(self) -> int:
        """Height of the image."""
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self._width, self._height

    @property
    def active_index(self) -> int:
        """Index of the active layer."""
        return self._stack.active_index

    def number_of_layers(self) -> int:
        """Number of layers, including the background layer."""
        return self._stack.size()

    def new_layer(self) -> None:
        """Add a fully transparent layer on top and make it active."""
        self._stack.insert_top(Raster(self._width, self._height, TRANSPARENT))

    def set_active_layer(self, index: int) -> None:
        """
        Make the layer at `index` the target of future edits.

        :raises IndexError: If the index is outside [0, number_of_layers()).
        """
        self._stack.set_active(index)
        logger.debug("Active layer is %d", index)

    def remove_layer(self, index: int) -> None:
        """
        Remove the layer at `index`.

        If the removed layer was active, the top layer becomes active.

        :raises IndexError: If `index` is 0 or outside [0, number_of_layers()).
        """
        self._stack.remove(index)

    def set_pixel_color(self, x: int, y: int, color: ColorLike) -> None:
        """
        Set a pixel of the active layer.

        :raises IndexError: If (x, y) is outside the image.
        :raises TypeError: If `color` is None.
        """
        self._stack.active.set_pixel_color(x, y, color)

    def draw_line(
        self, x1: int, y1: int, x2: int, y2: int, color: ColorLike
    ) -> None:
        """
        Draw a line on the active layer with the Bresenham algorithm.

        Pixels on the line are replaced by `color`, no blending over.

        :raises IndexError: If an endpoint is outside the image.
        """
        self._stack.active.draw_line(x1, y1, x2, y2, color)

    def convolve(self, kernel: KernelLike) -> None:
        """
        Filter the active layer with a square kernel of odd side.

        :raises ValueError: If the kernel is malformed or not smaller than
            the image.
        """
        self._stack.active.convolve(kernel)
        logger.debug("Convolved layer %d", self._stack.active_index)

    def get_pixel_color(self, x: int, y: int) -> Color:
        """
        Composited color of all layers at (x, y).

        :raises IndexError: If (x, y) is outside the image.
        """
        return self._stack.pixel_color_at(x, y)

    def as_flat_image(self) -> Raster:
        """Composite all layers, bottom to top, into a new raster."""
        return self._stack.flatten()

    def crop(self, width: int, height: int) -> None:
        """
        Crop all layers to the top-left `width` x `height` region.

        :raises ValueError: If the size is not positive or exceeds the
            current size. No layer is changed in that case.
        """
        self._stack.crop(width, height)
        self._width = width
        self._height = height

    def layers(self, top_down: bool = True) -> Iterator[Raster]:
        """
        Return a generator over copies of the layers.

        Each call starts a new traversal. Do not modify the image while a
        traversal is in progress.

        :param top_down: Start with the top layer. Default is True.
        """
        ordered = reversed(self._stack) if top_down else iter(self._stack)
        for layer in ordered:
            yield layer.copy()

    def numpy(self) -> NDArray[np.uint8]:
        """
        Get the composited image as a ``(height, width, 4)`` uint8 array.
        """
        return self.as_flat_image().numpy()

    def topil(self) -> "Image.Image":
        """
        Get the composited image as an RGBA PIL Image.
        """
        return self.as_flat_image().topil()

    def __len__(self) -> int:
        return self._stack.size()

    def __iter__(self) -> Iterator[Raster]:
        return self.layers(top_down=True)

    def __reversed__(self) -> Iterator[Raster]:
        return self.layers(top_down=False)

    def __repr__(self) -> str:
        return "%s(size=%dx%d, layers=%d, active=%d)" % (
            self.__class__.__name__,
            self._width,
            self._height,
            self._stack.size(),
            self._stack.active_index,
        )
