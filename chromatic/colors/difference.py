"""
Perceptual colour difference in CIE Lab.

- delta_e: CIE76, the Euclidean distance between two Lab points
- delta_e94: CIE94, weighting lightness, chroma and hue differences

Both accept colours in any space; they are converted to Lab first (alpha is
ignored). The CIE94 parameter sets are exposed as ``GRAPHIC_ARTS`` (the
default) and ``TEXTILES`` and can be unpacked into ``delta_e94``, e.g.
``delta_e94(reference, sample, *TEXTILES)``.
"""

from __future__ import annotations

import math
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .color_base import ColorBase


class DeltaE94Weights(NamedTuple):
    k_l: float
    k1: float
    k2: float


GRAPHIC_ARTS = DeltaE94Weights(k_l=1.0, k1=0.045, k2=0.015)
TEXTILES = DeltaE94Weights(k_l=2.0, k1=0.048, k2=0.014)


def _lab(colour: ColorBase) -> tuple[float, float, float]:
    lab = colour.to_lab()
    return lab[0], lab[1], lab[2]


def delta_e(colour1: ColorBase, colour2: ColorBase) -> float:
    """
    CIE76 colour difference.

    Returns:
        Non-negative distance; about 2.3 is a just noticeable difference
    """
    l1, a1, b1 = _lab(colour1)
    l2, a2, b2 = _lab(colour2)
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def delta_e94(
    reference: ColorBase,
    sample: ColorBase,
    k_l: float = GRAPHIC_ARTS.k_l,
    k1: float = GRAPHIC_ARTS.k1,
    k2: float = GRAPHIC_ARTS.k2,
) -> float:
    """
    CIE94 colour difference of sample against reference.

    The chroma and hue weights use the chroma of the reference only, so the
    result is not symmetric unless both colours have the same chroma.

    Args:
        reference: Reference colour
        sample: Colour compared against the reference
        k_l: Lightness weighting factor
        k1: Chroma weighting constant
        k2: Hue weighting constant

    Returns:
        Non-negative difference
    """
    l1, a1, b1 = _lab(reference)
    l2, a2, b2 = _lab(sample)

    delta_l = l1 - l2
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    delta_c = c1 - c2
    delta_a = a1 - a2
    delta_b = b1 - b2
    # rounding can make this slightly negative
    delta_h_squared = max(0.0, delta_a ** 2 + delta_b ** 2 - delta_c ** 2)

    s_l = 1.0
    s_c = 1.0 + k1 * c1
    s_h = 1.0 + k2 * c1
    k_c = k_h = 1.0

    return math.sqrt(
        (delta_l / (k_l * s_l)) ** 2
        + (delta_c / (k_c * s_c)) ** 2
        + delta_h_squared / (k_h * s_h) ** 2
    )
