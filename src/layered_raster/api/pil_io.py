"""
PIL IO module.

In-memory conversion between 8-bit RGBA arrays and PIL Images. Saving to a
file is left to PIL itself.
"""

import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)


def image_to_array(image: Image.Image) -> NDArray[np.uint8]:
    """
    Convert a PIL Image to a ``(height, width, 4)`` uint8 array.

    Images in other modes are converted to RGBA; modes without alpha become
    fully opaque.
    """
    if not isinstance(image, Image.Image):
        raise TypeError(f"Expected PIL Image, got {type(image).__name__}")
    if image.mode != "RGBA":
        logger.debug("Converting %s image to RGBA" % image.mode)
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8).copy()


def array_to_image(array: NDArray[np.uint8]) -> Image.Image:
    """Convert a ``(height, width, 4)`` uint8 array to an RGBA PIL Image."""
    # (height, width, 4) uint8 is inferred as RGBA.
    return Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8))
