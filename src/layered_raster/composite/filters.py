"""
Convolution filters.

The kernel is applied as a cross-correlation: ``kernel[row][col]`` weights
the pixel at ``(x + col - k // 2, y + row - k // 2)``. Neighbours outside the
raster repeat the nearest edge pixel. Only the color channels are filtered,
alpha is kept as is.
"""

import logging
from typing import Sequence, Union

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import NDArray

from layered_raster.composite.utils import round_half_up
from layered_raster.constants import Channel

logger = logging.getLogger(__name__)

KernelLike = Union[NDArray[np.floating], Sequence[Sequence[float]]]


def check_kernel(kernel: KernelLike, width: int, height: int) -> NDArray[np.float64]:
    """
    Validate a filter kernel against a raster size.

    :return: The kernel as a 2-D float array.
    :raises ValueError: If the kernel is not a square matrix of odd side
        smaller than both `width` and `height`.
    """
    if kernel is None:
        raise ValueError("Kernel must not be None")
    try:
        array = np.asarray(kernel, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Kernel must be a numeric square matrix: {e}")
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"Kernel must be a square matrix, got shape {array.shape}")
    size = array.shape[0]
    if size == 0 or size % 2 == 0:
        raise ValueError(f"Kernel side must be odd and positive, got {size}")
    if size >= width or size >= height:
        raise ValueError(
            f"Kernel side {size} must be smaller than the raster size {width}x{height}"
        )
    if not np.all(np.isfinite(array)):
        raise ValueError("Kernel weights must be finite")
    return array


def convolve(
    array: NDArray[np.uint8], kernel: NDArray[np.float64]
) -> NDArray[np.uint8]:
    """
    Filter the color channels of an RGBA array.

    :param array: ``(height, width, 4)`` 8-bit array.
    :param kernel: Validated kernel, see :py:func:`check_kernel`.
    :return: New array; the input is unchanged.
    """
    radius = kernel.shape[0] // 2
    color = array[:, :, : Channel.ALPHA].astype(np.float64)
    padded = np.pad(color, ((radius, radius), (radius, radius), (0, 0)), mode="edge")
    # (height, width, 3, k, k) view of every neighbourhood
    windows = sliding_window_view(padded, kernel.shape, axis=(0, 1))
    filtered = np.einsum("hwcij,ij->hwc", windows, kernel)

    result = array.copy()
    result[:, :, : Channel.ALPHA] = round_half_up(filtered)
    logger.debug(
        "Convolved %dx%d raster with %s kernel", array.shape[1], array.shape[0], kernel.shape
    )
    return result
