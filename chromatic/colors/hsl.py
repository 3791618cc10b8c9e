from __future__ import annotations

from ..types.color_types import Channel, ColorSpace
from ..types.format_type import HUE_360
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component

HUE_CHANNEL = Channel("hue", 0.0, HUE_360, cyclic=True)

HSL_CHANNELS = (
    HUE_CHANNEL,
    Channel("saturation", 0.0, 1.0),
    Channel("lightness", 0.0, 1.0),
)


class Hsl(ColorBase):
    """
    Hue, saturation, lightness.

    Hue is in degrees and wraps: ``Hsl(370, 1, 0.5)`` stores hue 10.
    Hex and bytes go through RGB.
    """
    __slots__ = ()
    mode = ColorSpace.HSL
    channels = HSL_CHANNELS
    byte_space = ColorSpace.RGB

    hue = component(0, "Hue in degrees [0, 360).")
    saturation = component(1)
    lightness = component(2)


class HslAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.HSLA
    channels = HSL_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.RGBA

    hue = component(0, "Hue in degrees [0, 360).")
    saturation = component(1)
    lightness = component(2)


hsl_space_to_class = build_registry(Hsl, HslAlpha)
