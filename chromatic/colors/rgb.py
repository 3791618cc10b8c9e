from __future__ import annotations

from ..types.color_types import Channel, ColorSpace
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component

RGB_CHANNELS = (
    Channel("r", 0.0, 1.0),
    Channel("g", 0.0, 1.0),
    Channel("b", 0.0, 1.0),
)


class Rgb(ColorBase):
    """
    Linear-light RGB, every channel in [0, 1].

    This is the hub of the conversion graph. Hex and bytes are written as
    the linear values scaled to 0-255.
    """
    __slots__ = ()
    mode = ColorSpace.RGB
    channels = RGB_CHANNELS
    byte_space = ColorSpace.RGB

    r = component(0, "Red in [0, 1].")
    g = component(1, "Green in [0, 1].")
    b = component(2, "Blue in [0, 1].")


class RgbAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.RGBA
    channels = RGB_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.RGBA

    r = component(0, "Red in [0, 1].")
    g = component(1, "Green in [0, 1].")
    b = component(2, "Blue in [0, 1].")


rgb_space_to_class = build_registry(Rgb, RgbAlpha)
