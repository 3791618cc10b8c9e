"""
Chromatic Color Space Conversions
=================================

Pure functions converting component tuples between colour spaces, and the
graph that chains them.

Direct edges
------------
RGB <-> sRGB:
    rgb_to_srgb, srgb_to_rgb (gamma_encode / gamma_decode per channel)
RGB <-> HSL / HSV:
    unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_hsv, hsv_to_unit_rgb
HSL <-> HSV:
    hsl_to_hsv, hsv_to_hsl
RGB <-> XYZ:
    rgb_to_xyz, xyz_to_rgb (linear RGB only)
XYZ <-> Lab:
    xyz_to_lab, lab_to_xyz (D65 white)
RGB <-> Grey:
    rgb_to_grey (Rec. 709 luma), grey_to_rgb

High-Level API
--------------
    convert(color, from_space, to_space)
        Converts through the shortest path of direct edges, carrying alpha.

Examples
--------
>>> from chromatic.conversions import convert
>>> convert((1.0, 0.0, 0.0), "rgb", "hsl")
(0.0, 1.0, 0.5)
>>> convert((0.0, 1.0, 0.5, 0.25), "hsla", "rgba")
(1.0, 0.0, 0.0, 0.25)
"""

from .gamma import gamma_decode, gamma_encode, rgb_to_srgb, srgb_to_rgb
from .to_grey import rgb_to_grey
from .to_hsl import hsv_to_hsl, unit_rgb_to_hsl
from .to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from .to_lab import xyz_to_lab
from .to_rgb import grey_to_rgb, hsl_to_unit_rgb, hsv_to_unit_rgb, xyz_to_rgb
from .to_xyz import lab_to_xyz, rgb_to_xyz
from .wrapper import CONVERSION_EDGES, conversion_path, convert

__all__ = [
    "gamma_decode",
    "gamma_encode",
    "rgb_to_srgb",
    "srgb_to_rgb",
    "rgb_to_grey",
    "grey_to_rgb",
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "CONVERSION_EDGES",
    "conversion_path",
    "convert",
]
