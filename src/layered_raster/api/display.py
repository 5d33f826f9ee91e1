"""
Rendering onto a display canvas.

Example usage::

    from layered_raster import LayeredImage
    from layered_raster.api.display import render

    image = LayeredImage(64, 48)
    ...
    render(image, window)  # window implements CanvasProtocol
"""

import logging
from typing import Optional, Union

from layered_raster.api.color import Color
from layered_raster.api.layered_image import LayeredImage
from layered_raster.api.protocols import CanvasProtocol
from layered_raster.api.raster import Raster

logger = logging.getLogger(__name__)


def render(source: Union[LayeredImage, Raster], canvas: CanvasProtocol) -> None:
    """
    Draw `source` on `canvas` row by row and show the frame once.

    A layered image is flattened first.
    """
    raster = source.as_flat_image() if isinstance(source, LayeredImage) else source
    if not isinstance(raster, Raster):
        raise TypeError(f"Expected LayeredImage or Raster, got {type(source).__name__}")
    _draw(raster, canvas)
    canvas.show()


def render_layers(image: LayeredImage, canvas: CanvasProtocol) -> None:
    """
    Draw the layers of `image` one by one from bottom to top.

    Every layer is composited over the canvas content drawn so far and the
    frame is shown after each layer, so a viewer sees the image build up.
    The final frame equals :py:meth:`LayeredImage.as_flat_image`.
    """
    composite: Optional[Raster] = None
    for index, layer in enumerate(reversed(image)):
        composite = layer if composite is None else Raster.over(layer, composite)
        logger.debug("Rendering layer %d", index)
        _draw(composite, canvas)
        canvas.show()


def _draw(raster: Raster, canvas: CanvasProtocol) -> None:
    data = raster.numpy()
    for y in range(raster.height):
        for x in range(raster.width):
            canvas.set_pixel(x, y, Color.coerce(data[y, x]))
