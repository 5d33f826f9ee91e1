"""
Protocol definitions for the display collaborator.

A canvas is anything that accepts single pixels and can present a finished
frame, such as a window or an LED matrix driver. The library never depends
on a concrete display implementation.
"""

from typing import Protocol, runtime_checkable

from layered_raster.api.color import Color


@runtime_checkable
class CanvasProtocol(Protocol):
    """
    Protocol defining the drawing surface interface.
    """

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the pixel at (x, y) of the pending frame."""
        ...

    def show(self) -> None:
        """Present the pending frame."""
        ...
