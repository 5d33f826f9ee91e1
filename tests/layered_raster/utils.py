import logging
import math
from typing import Sequence

import numpy as np

from layered_raster.api.raster import Raster

logging.basicConfig(level=logging.DEBUG)

RED = (255, 0, 0, 255)
HALF_RED = (255, 0, 0, 128)
HALF_GREEN = (0, 255, 0, 128)
HALF_BLUE = (0, 0, 255, 128)
TRANSPARENT = (0, 0, 0, 0)


def reference_over(top: Sequence[int], bottom: Sequence[int]) -> tuple[int, ...]:
    """Porter-Duff over on plain floats, rounded half up."""
    at, ab = top[3] / 255, bottom[3] / 255
    out_a = at + ab * (1 - at)
    if out_a == 0:
        return (0, 0, 0, 0)
    channels = []
    for ct, cb in zip(top[:3], bottom[:3]):
        c = (ct / 255 * at + cb / 255 * ab * (1 - at)) / out_a
        channels.append(min(255, max(0, math.floor(c * 255 + 0.5))))
    return tuple(channels) + (math.floor(out_a * 255 + 0.5),)


def random_raster(rng: np.random.Generator, width: int, height: int) -> Raster:
    return Raster.fromarray(rng.integers(0, 256, (height, width, 4), dtype=np.uint8))


def changed_pixels(raster: Raster, background: Sequence[int]) -> set[tuple[int, int]]:
    data = raster.numpy()
    ys, xs = np.nonzero(np.any(data != np.array(background, np.uint8), axis=2))
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
