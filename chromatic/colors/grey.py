from __future__ import annotations

from ..types.color_types import Channel, ColorSpace
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component

GREY_CHANNEL = Channel("grey", 0.0, 1.0)


class Grey(ColorBase):
    """Single intensity channel in [0, 1]."""
    __slots__ = ()
    mode = ColorSpace.GREY
    channels = (GREY_CHANNEL,)
    byte_space = ColorSpace.GREY

    grey = component(0, "Intensity in [0, 1].")


class GreyAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.GREYA
    channels = (GREY_CHANNEL, ALPHA_CHANNEL)
    byte_space = ColorSpace.GREYA

    grey = component(0, "Intensity in [0, 1].")


grey_space_to_class = build_registry(Grey, GreyAlpha)
