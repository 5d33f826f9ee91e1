"""
Various constants for layered_raster
"""

from enum import IntEnum


class Channel(IntEnum):
    """
    Channel index within an RGBA pixel.
    """

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


#: Number of channels of every pixel.
CHANNELS = 4

#: Largest value of an 8-bit channel.
MAX_VALUE = 255

#: Channel values of the background layer of a new image.
OPAQUE_BLACK = (0, 0, 0, MAX_VALUE)

#: Channel values of a newly added layer.
TRANSPARENT = (0, 0, 0, 0)
