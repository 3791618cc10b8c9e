from .color_types import (
    Channel,
    ColorMode,
    ColorSpace,
    HUE_SPACES,
    is_hue_space,
    to_color_space,
)
from .transform_types import Interpolator, UnitTransform

__all__ = [
    "Channel",
    "ColorMode",
    "ColorSpace",
    "HUE_SPACES",
    "is_hue_space",
    "to_color_space",
    "Interpolator",
    "UnitTransform",
]
