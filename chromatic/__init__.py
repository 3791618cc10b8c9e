"""Chromatic: colour spaces, conversions and colour maps."""

from .colors import (
    ColorBase,
    WithAlpha,
    Grey,
    GreyAlpha,
    Rgb,
    RgbAlpha,
    Srgb,
    SrgbAlpha,
    Hsl,
    HslAlpha,
    Hsv,
    HsvAlpha,
    Lab,
    LabAlpha,
    Xyz,
    XyzAlpha,
    color_class,
    lerp,
    delta_e,
    delta_e94,
    GRAPHIC_ARTS,
    TEXTILES,
)
from .conversions import convert
from .errors import ChromaticError, ColourParsingError, InvalidColourError, InvalidColourMapError
from .gradients import ColourMap
from .types import ColorSpace

__version__ = "0.1.0"

__all__ = [
    "ColorBase",
    "WithAlpha",
    "Grey",
    "GreyAlpha",
    "Rgb",
    "RgbAlpha",
    "Srgb",
    "SrgbAlpha",
    "Hsl",
    "HslAlpha",
    "Hsv",
    "HsvAlpha",
    "Lab",
    "LabAlpha",
    "Xyz",
    "XyzAlpha",
    "ColorSpace",
    "color_class",
    "convert",
    "lerp",
    "delta_e",
    "delta_e94",
    "GRAPHIC_ARTS",
    "TEXTILES",
    "ColourMap",
    "ChromaticError",
    "InvalidColourError",
    "ColourParsingError",
    "InvalidColourMapError",
]
