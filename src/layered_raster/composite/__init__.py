"""
Composite module for pixel-level raster operations.

This subpackage holds the numeric kernels behind the raster API. All
functions work on NumPy arrays of shape ``(height, width, 4)`` (or ``(4,)``
for single pixels) holding 8-bit RGBA values.

Key modules:

- :py:mod:`layered_raster.composite.blend`: Porter-Duff over compositing
- :py:mod:`layered_raster.composite.filters`: Kernel convolution
- :py:mod:`layered_raster.composite.draw`: Bresenham line rasterization
"""

from layered_raster.composite.blend import fold, over
from layered_raster.composite.draw import bresenham
from layered_raster.composite.filters import check_kernel, convolve

__all__ = [
    "bresenham",
    "check_kernel",
    "convolve",
    "fold",
    "over",
]
