"""
Color value type.
"""

import logging
from numbers import Integral
from typing import Any, Iterator, Sequence, Union

from attrs import astuple, field, frozen

from layered_raster.constants import MAX_VALUE
from layered_raster.validators import instance_of, range_

logger = logging.getLogger(__name__)

_CHANNEL_VALIDATOR = [instance_of(Integral), range_(0, MAX_VALUE)]


@frozen
class Color:
    """
    Immutable 8-bit RGBA color.

    Colors compare and hash by value, and behave like a ``(red, green, blue,
    alpha)`` tuple for unpacking and indexing::

        red, green, blue, alpha = Color(255, 0, 0)

    .. py:attribute:: red
    .. py:attribute:: green
    .. py:attribute:: blue
    .. py:attribute:: alpha

        Opacity, 0 is fully transparent and 255 fully opaque. Defaults to 255.
    """

    red: int = field(validator=_CHANNEL_VALIDATOR)
    green: int = field(validator=_CHANNEL_VALIDATOR)
    blue: int = field(validator=_CHANNEL_VALIDATOR)
    alpha: int = field(default=MAX_VALUE, validator=_CHANNEL_VALIDATOR)

    @classmethod
    def coerce(cls, value: Union["Color", Sequence[int], Any]) -> "Color":
        """
        Return `value` as a :py:class:`Color`.

        :param value: A :py:class:`Color` or a sequence of four channel values.
        :raises TypeError: If `value` is `None` or not a 4-sequence.
        :raises ValueError: If a channel is outside [0, 255].
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise TypeError("Color must not be None")
        try:
            channels = tuple(value)
        except TypeError:
            raise TypeError(f"Expected Color or 4-sequence, got {type(value).__name__}")
        if len(channels) != 4:
            raise TypeError(f"Expected 4 channel values, got {len(channels)}")
        return cls(*(int(c) if isinstance(c, Integral) else c for c in channels))

    @property
    def is_opaque(self) -> bool:
        return self.alpha == MAX_VALUE

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def astuple(self) -> tuple[int, int, int, int]:
        return astuple(self)

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> int:
        return self.astuple()[index]
