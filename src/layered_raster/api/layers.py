"""
Layer module.

This module implements :py:class:`LayerStack`, the ordered container of
:py:class:`~layered_raster.api.raster.Raster` layers behind a layered image.

Layer order:

Index 0 is the bottom (background) layer and ``len(stack) - 1`` the top.
The bottom layer can never be removed, so a stack always holds at least one
layer. Exactly one layer is active; only its index is stored and the layer
itself is looked up on demand::

    stack = LayerStack(Raster(8, 8, (0, 0, 0, 255)))
    stack.insert_top(Raster(8, 8))    # index 1 becomes active
    stack.active.set_pixel_color(0, 0, (255, 0, 0, 128))

    # Iterate bottom to top
    for layer in stack:
        print(layer)

    # Iterate top to bottom
    for layer in reversed(stack):
        print(layer)

    result = stack.flatten()
"""

import logging
from typing import Iterator

import numpy as np

from layered_raster.api.color import Color
from layered_raster.api.raster import Raster
from layered_raster.composite import blend

logger = logging.getLogger(__name__)


class LayerStack:
    """
    Ordered stack of equally sized rasters with one active layer.

    :param bottom: The background layer, initially active.
    """

    def __init__(self, bottom: Raster):
        if not isinstance(bottom, Raster):
            raise TypeError(f"Expected Raster instance, got {type(bottom).__name__}")
        self._layers: list[Raster] = [bottom]
        self._active_index = 0

    @property
    def width(self) -> int:
        return self._layers[0].width

    @property
    def height(self) -> int:
        return self._layers[0].height

    @property
    def active_index(self) -> int:
        """Index of the active layer."""
        return self._active_index

    @property
    def active(self) -> Raster:
        """The active layer."""
        return self._layers[self._active_index]

    def size(self) -> int:
        """Number of layers, including the bottom layer."""
        return len(self._layers)

    def get(self, index: int) -> Raster:
        """
        Layer at `index`.

        :raises IndexError: If the index is outside [0, size()).
        """
        self._check_index(index)
        return self._layers[index]

    def first(self) -> Raster:
        """The bottom layer."""
        return self._layers[0]

    def last(self) -> Raster:
        """The top layer."""
        return self._layers[-1]

    def insert_top(self, raster: Raster) -> None:
        """
        Add a layer above the top-most layer and make it active.

        :raises TypeError: If `raster` is not a Raster.
        :raises ValueError: If its size differs from the stack or it is
            already in the stack.
        """
        if not isinstance(raster, Raster):
            raise TypeError(f"Expected Raster instance, got {type(raster).__name__}")
        if raster in self:
            raise ValueError(f"Layer {raster} is already in the stack")
        if raster.size != (self.width, self.height):
            raise ValueError(
                f"Layer size {raster.size} does not match stack size "
                f"{(self.width, self.height)}"
            )
        self._layers.append(raster)
        self._active_index = len(self._layers) - 1
        logger.debug("Inserted layer %d", self._active_index)

    def remove(self, index: int) -> None:
        """
        Remove the layer at `index`.

        If it was active, the top layer after removal becomes active.
        Otherwise the same layer stays active, even when its index shifts.

        :raises IndexError: If `index` is 0 or outside [0, size()).
        """
        self._check_index(index)
        if index == 0:
            raise IndexError("Cannot remove the bottom layer")
        del self._layers[index]
        if index == self._active_index:
            self._active_index = len(self._layers) - 1
        elif index < self._active_index:
            self._active_index -= 1
        logger.debug(
            "Removed layer %d, active layer is %d", index, self._active_index
        )

    def set_active(self, index: int) -> None:
        """
        Make the layer at `index` active.

        :raises IndexError: If the index is outside [0, size()).
        """
        self._check_index(index)
        self._active_index = index

    def crop(self, width: int, height: int) -> None:
        """
        Crop every layer to the top-left `width` x `height` region.

        The size is validated once before any layer changes.

        :raises ValueError: If the size is not positive or exceeds the
            current size.
        """
        self._layers[0].check_crop(width, height)
        for layer in self._layers:
            layer.crop(width, height)
        logger.debug("Cropped %d layers to %dx%d", len(self._layers), width, height)

    def flatten(self) -> Raster:
        """
        Composite all layers into a new raster.

        Starting with the bottom layer, each layer above is placed over the
        accumulated result. The stack is not modified.
        """
        return Raster.fromarray(blend.fold(layer._data for layer in self._layers))

    def pixel_color_at(self, x: int, y: int) -> Color:
        """
        Composited color at (x, y), equal to ``flatten().get_pixel_color(x, y)``.

        :raises IndexError: If (x, y) is outside the stack.
        """
        self._layers[0]._check_coordinate(x, y)
        pixels = (layer._data[y, x] for layer in self._layers)
        return Color.coerce(blend.fold(pixels))

    def _check_index(self, index: int) -> None:
        if not isinstance(index, (int, np.integer)) or isinstance(index, bool):
            raise TypeError(f"Layer index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._layers):
            raise IndexError(
                f"Layer index {index} out of range [0, {len(self._layers)})"
            )

    def __len__(self) -> int:
        return self._layers.__len__()

    def __iter__(self) -> Iterator[Raster]:
        return self._layers.__iter__()

    def __reversed__(self) -> Iterator[Raster]:
        return self._layers.__reversed__()

    def __contains__(self, item: object) -> bool:
        return any(item is layer for layer in self._layers)

    def __getitem__(self, index: int) -> Raster:
        return self.get(index)

    def __repr__(self) -> str:
        return "%s(size=%dx%d, layers=%d, active=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            len(self._layers),
            self._active_index,
        )
