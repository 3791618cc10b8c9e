from __future__ import annotations

from ..types.color_types import Channel, ColorSpace
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component
from .hsl import HUE_CHANNEL

HSV_CHANNELS = (
    HUE_CHANNEL,
    Channel("saturation", 0.0, 1.0),
    Channel("value", 0.0, 1.0),
)


class Hsv(ColorBase):
    """Hue, saturation, value. Hue wraps like Hsl; hex and bytes go through RGB."""
    __slots__ = ()
    mode = ColorSpace.HSV
    channels = HSV_CHANNELS
    byte_space = ColorSpace.RGB

    hue = component(0, "Hue in degrees [0, 360).")
    saturation = component(1)
    value = component(2)


class HsvAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.HSVA
    channels = HSV_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.RGBA

    hue = component(0, "Hue in degrees [0, 360).")
    saturation = component(1)
    value = component(2)


hsv_space_to_class = build_registry(Hsv, HsvAlpha)
