"""Utility functions for composite operations."""

import numpy as np
from numpy.typing import NDArray

from layered_raster.constants import MAX_VALUE


def divide(a: NDArray[np.floating], b: NDArray[np.floating]) -> NDArray[np.floating]:
    """Safe division for color ops, zero where the divisor is zero."""
    with np.errstate(divide="ignore", invalid="ignore"):
        c = np.true_divide(a, b)
        c[~np.isfinite(c)] = 0.0
    return c


def to_float(array: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Normalize 8-bit channel values to [0, 1]."""
    return array.astype(np.float64) / MAX_VALUE


def round_half_up(x: NDArray[np.floating]) -> NDArray[np.uint8]:
    """Round half up and clamp to the 8-bit range."""
    return np.clip(np.floor(x + 0.5), 0, MAX_VALUE).astype(np.uint8)


def to_uint8(x: NDArray[np.floating]) -> NDArray[np.uint8]:
    """Convert normalized values back to 8-bit channels."""
    return round_half_up(x * MAX_VALUE)
