from __future__ import annotations

from ..conversions.constants import D65_WHITE
from ..types.color_types import Channel, ColorSpace
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component

# matrix round-off can push white slightly past the reference white
XYZ_SLACK = 1e-4

XYZ_CHANNELS = tuple(
    Channel(name, 0.0, white + XYZ_SLACK) for name, white in zip("xyz", D65_WHITE)
)


class Xyz(ColorBase):
    """
    CIE 1931 XYZ tristimulus values relative to D65.

    Each component is bounded by the D65 reference white
    (0.95047, 1.0, 1.08883). Hex and bytes go through RGB.
    """
    __slots__ = ()
    mode = ColorSpace.XYZ
    channels = XYZ_CHANNELS
    byte_space = ColorSpace.RGB

    x = component(0)
    y = component(1, "Relative luminance.")
    z = component(2)


class XyzAlpha(WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.XYZA
    channels = XYZ_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.RGBA

    x = component(0)
    y = component(1, "Relative luminance.")
    z = component(2)


xyz_space_to_class = build_registry(Xyz, XyzAlpha)
