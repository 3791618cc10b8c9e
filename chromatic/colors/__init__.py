from .color import color_class, color_convert, lerp, unified_space_to_class, with_alpha
from .color_base import ColorBase, WithAlpha
from .difference import GRAPHIC_ARTS, TEXTILES, DeltaE94Weights, delta_e, delta_e94
from .grey import Grey, GreyAlpha
from .hsl import Hsl, HslAlpha
from .hsv import Hsv, HsvAlpha
from .lab import Lab, LabAlpha
from .rgb import Rgb, RgbAlpha
from .srgb import Srgb, SrgbAlpha
from .xyz import Xyz, XyzAlpha

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
    "color_class",
    "color_convert",
    "with_alpha",
    "lerp",
    "unified_space_to_class",
    "delta_e",
    "delta_e94",
    "DeltaE94Weights",
    "GRAPHIC_ARTS",
    "TEXTILES",
]
