import logging
from typing import Any

import numpy as np
import pytest

from layered_raster.composite.filters import check_kernel, convolve

logger = logging.getLogger(__name__)

BOX_BLUR = [[1 / 9] * 3] * 3


def _gradient(width: int, height: int) -> np.ndarray:
    array = np.zeros((height, width, 4), dtype=np.uint8)
    for x in range(width):
        array[:, x, 0] = 10 * x
    for y in range(height):
        array[y, :, 1] = 20 * y
    array[:, :, 2] = 7
    array[:, :, 3] = np.arange(width * height, dtype=np.uint8).reshape(height, width)
    return array


@pytest.mark.parametrize(
    "kernel",
    [
        [[1.0]],
        [[0, 0, 0], [0, 1, 0], [0, 0, 0]],
        np.eye(5),
    ],
)
def test_check_kernel_valid(kernel: Any) -> None:
    array = check_kernel(kernel, 8, 6)
    assert array.dtype == np.float64
    assert array.ndim == 2


@pytest.mark.parametrize(
    "kernel",
    [
        None,
        [],
        [[]],
        [[1, 1], [1, 1]],
        [[1, 2, 3]],
        [[1], [1, 2]],
        [[[1.0]]],
        np.ones((7, 7)),
        [[float("nan")]],
        [["a"]],
    ],
)
def test_check_kernel_invalid(kernel: Any) -> None:
    with pytest.raises(ValueError):
        check_kernel(kernel, 8, 6)


def test_check_kernel_must_be_smaller_than_raster() -> None:
    check_kernel(np.ones((3, 3)), 4, 4)
    with pytest.raises(ValueError):
        check_kernel(np.ones((3, 3)), 3, 4)
    with pytest.raises(ValueError):
        check_kernel(np.ones((3, 3)), 4, 3)


def test_convolve_identity(rng: np.random.Generator) -> None:
    array = rng.integers(0, 256, (4, 5, 4), dtype=np.uint8)
    result = convolve(array, check_kernel([[1.0]], 5, 4))
    assert np.array_equal(result, array)


def test_convolve_keeps_alpha() -> None:
    array = _gradient(5, 4)
    result = convolve(array, check_kernel(BOX_BLUR, 5, 4))
    assert np.array_equal(result[:, :, 3], array[:, :, 3])


def test_convolve_uniform_blur() -> None:
    array = np.empty((4, 4, 4), dtype=np.uint8)
    array[:, :] = (10, 20, 30, 40)
    result = convolve(array, check_kernel(BOX_BLUR, 4, 4))
    assert np.array_equal(result, array)


def test_convolve_clamps_to_edge() -> None:
    # Each pixel takes the color of its left neighbour.
    kernel = check_kernel([[0, 0, 0], [1, 0, 0], [0, 0, 0]], 4, 4)
    result = convolve(_gradient(4, 4), kernel)
    assert list(result[0, :, 0]) == [0, 0, 10, 20]
    assert list(result[:, 0, 1]) == [0, 20, 40, 60]


def test_convolve_row_offset() -> None:
    # Each pixel takes the color of the pixel above it.
    kernel = check_kernel([[0, 1, 0], [0, 0, 0], [0, 0, 0]], 4, 4)
    result = convolve(_gradient(4, 4), kernel)
    assert list(result[:, 2, 1]) == [0, 0, 20, 40]
    assert list(result[1, :, 0]) == [0, 10, 20, 30]


def test_convolve_clamps_values() -> None:
    array = _gradient(4, 4)
    bright = convolve(array, check_kernel([[100.0]], 4, 4))
    assert np.all(bright[:, 1:, 0] == 255)
    assert np.all(bright[:, :, 2] == 255)
    dark = convolve(array, check_kernel([[-1.0]], 4, 4))
    assert np.all(dark[:, :, :3] == 0)
    assert np.array_equal(dark[:, :, 3], array[:, :, 3])


def test_convolve_rounds_half_up() -> None:
    array = np.zeros((3, 3, 4), dtype=np.uint8)
    array[:, :, 0] = 1
    result = convolve(array, check_kernel([[0.5]], 3, 3))
    assert np.all(result[:, :, 0] == 1)


def test_convolve_returns_new_array() -> None:
    array = _gradient(4, 4)
    original = array.copy()
    convolve(array, check_kernel(BOX_BLUR, 4, 4))
    assert np.array_equal(array, original)
