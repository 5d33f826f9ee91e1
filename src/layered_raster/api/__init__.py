"""
High-level API for layered rasters.

- :py:class:`~layered_raster.api.layered_image.LayeredImage`: layered image facade
- :py:class:`~layered_raster.api.layers.LayerStack`: ordered layer container
- :py:class:`~layered_raster.api.raster.Raster`: single RGBA pixel buffer
- :py:class:`~layered_raster.api.color.Color`: 8-bit RGBA value
"""

from layered_raster.api.color import Color
from layered_raster.api.layered_image import LayeredImage
from layered_raster.api.layers import LayerStack
from layered_raster.api.raster import Raster

__all__ = [
    "Color",
    "LayerStack",
    "LayeredImage",
    "Raster",
]
