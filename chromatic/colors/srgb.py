from __future__ import annotations

from ..types.color_types import ColorSpace
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component
from .rgb import RGB_CHANNELS


class Srgb(ColorBase):
    """Gamma-encoded sRGB, every channel in [0, 1]. Web hex colours live here."""
    __slots__ = ()
    mode = ColorSpace.SRGB
    channels = RGB_CHANNELS
    byte_space = ColorSpace.SRGB

    r = component(0)
    g = component(1)
    b = component(2)


class SrgbAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.SRGBA
    channels = RGB_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.SRGBA

    r = component(0)
    g = component(1)
    b = component(2)


srgb_space_to_class = build_registry(Srgb, SrgbAlpha)
