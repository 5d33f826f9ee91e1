"""
Line rasterization.
"""

from typing import Iterator


def bresenham(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """
    Yield the ``(x, y)`` pixels of the line between two points.

    Integer-only Bresenham. Endpoints are put in a canonical order before
    stepping, so swapping them yields the same pixel set. Both endpoints are
    yielded exactly once; equal endpoints yield a single pixel.
    """
    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1, x2, y2 = y1, x1, y2, x2
    if x1 > x2:
        x1, y1, x2, y2 = x2, y2, x1, y1

    dx = x2 - x1
    dy = abs(y2 - y1)
    ystep = 1 if y1 < y2 else -1
    error = dx // 2
    y = y1
    for x in range(x1, x2 + 1):
        yield (y, x) if steep else (x, y)
        error -= dy
        if error < 0:
            y += ystep
            error += dx
