from __future__ import annotations
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

# Easing applied to the local fraction of a colour map segment.
UnitTransform = Callable[[float], float]

# Blends two colours of the same class at a fraction; replaces ColorBase.lerp.
Interpolator = Callable[["ColorBase", "ColorBase", float], "ColorBase"]
