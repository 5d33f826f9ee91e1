"""
Porter-Duff compositing.

Arrays have the shape ``(..., 4)`` with 8-bit RGBA channels in the last
axis, so the same functions operate on a whole raster ``(height, width, 4)``
and on a single pixel ``(4,)``. Sharing one code path keeps per-pixel queries
numerically identical to full-image flattening.
"""

import logging
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from layered_raster.composite.utils import divide, to_float, to_uint8
from layered_raster.constants import Channel

logger = logging.getLogger(__name__)


def over(top: NDArray[np.uint8], bottom: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """
    Composite `top` over `bottom`.

    With normalized channels::

        outA = At + Ab * (1 - At)
        outC = (Ct * At + Cb * Ab * (1 - At)) / outA

    where ``outC`` is 0 wherever ``outA`` is 0. Results are rounded half up.

    :raises ValueError: If the shapes differ.
    """
    if top.shape != bottom.shape:
        raise ValueError(
            f"Cannot composite arrays of different shapes: {top.shape} vs {bottom.shape}"
        )
    Ct, Cb = to_float(top[..., : Channel.ALPHA]), to_float(bottom[..., : Channel.ALPHA])
    At, Ab = to_float(top[..., Channel.ALPHA :]), to_float(bottom[..., Channel.ALPHA :])

    Ab_visible = Ab * (1.0 - At)
    alpha = At + Ab_visible
    color = divide(Ct * At + Cb * Ab_visible, alpha)
    return to_uint8(np.concatenate((color, alpha), axis=-1))


def fold(layers: Iterable[NDArray[np.uint8]]) -> NDArray[np.uint8]:
    """
    Composite a bottom-to-top sequence of arrays.

    The first array is the initial backdrop; each following array is placed
    over the accumulated result.

    :raises ValueError: If `layers` is empty or the shapes differ.
    """
    iterator = iter(layers)
    try:
        result = np.array(next(iterator), dtype=np.uint8, copy=True)
    except StopIteration:
        raise ValueError("Cannot composite an empty sequence of layers")
    for layer in iterator:
        result = over(layer, result)
    return result
