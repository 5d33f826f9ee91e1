"""
layered-raster: Python package for layered RGBA raster images.

A :py:class:`LayeredImage` is a stack of equally sized RGBA layers. Edits go
to the active layer; queries composite all layers with the Porter-Duff
"over" operator, from the bottom (background) layer to the top.

Basic usage::

    from layered_raster import LayeredImage

    image = LayeredImage(320, 240)
    image.new_layer()
    image.draw_line(0, 0, 319, 239, (255, 255, 0, 200))
    image.convolve([[1 / 9] * 3] * 3)

    # Export to PNG
    image.topil().save('output.png')

Architecture:

- :py:mod:`layered_raster.api`: Color, Raster, LayerStack and LayeredImage
- :py:mod:`layered_raster.composite`: Compositing, filtering and drawing kernels
"""

from layered_raster.api.color import Color
from layered_raster.api.layered_image import LayeredImage
from layered_raster.api.raster import Raster
from layered_raster.version import __version__

__all__ = ["Color", "LayeredImage", "Raster", "__version__"]
