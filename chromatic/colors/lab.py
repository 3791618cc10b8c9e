from __future__ import annotations

from ..types.color_types import Channel, ColorSpace
from . import difference
from .color_base import ALPHA_CHANNEL, ColorBase, WithAlpha, build_registry, component

LAB_CHANNELS = (
    Channel("l", 0.0, 100.0),
    Channel("a_star", -128.0, 127.0),
    Channel("b_star", -128.0, 127.0),
)


class _LabDifference:
    __slots__ = ()

    def delta_e(self, other: ColorBase) -> float:
        """CIE76 difference to another colour."""
        return difference.delta_e(self, other)  # type: ignore[arg-type]

    def delta_e94(
        self,
        other: ColorBase,
        k_l: float = difference.GRAPHIC_ARTS.k_l,
        k1: float = difference.GRAPHIC_ARTS.k1,
        k2: float = difference.GRAPHIC_ARTS.k2,
    ) -> float:
        """CIE94 difference of other, with this colour as the reference."""
        return difference.delta_e94(self, other, k_l, k1, k2)  # type: ignore[arg-type]


class Lab(_LabDifference, ColorBase):
    """
    CIE L*a*b* relative to D65.

    L* is in [0, 100]; a* and b* are checked against [-128, 127] on
    construction, but conversions and interpolation may go past it.
    Hex and bytes go through RGB.
    """
    __slots__ = ()
    mode = ColorSpace.LAB
    channels = LAB_CHANNELS
    byte_space = ColorSpace.RGB

    l = component(0, "Lightness L* in [0, 100].")
    a_star = component(1, "Green (-) to red (+) axis.")
    b_star = component(2, "Blue (-) to yellow (+) axis.")


class LabAlpha(_LabDifference, WithAlpha, ColorBase):
    __slots__ = ()
    mode = ColorSpace.LABA
    channels = LAB_CHANNELS + (ALPHA_CHANNEL,)
    byte_space = ColorSpace.RGBA

    l = component(0, "Lightness L* in [0, 100].")
    a_star = component(1)
    b_star = component(2)


lab_space_to_class = build_registry(Lab, LabAlpha)
