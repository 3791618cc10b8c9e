"""Numeric constants shared by the conversion functions."""

import numpy as np

# sRGB transfer function (IEC 61966-2-1)
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_SCALE = 1.055
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4

# Linear RGB -> CIE XYZ, sRGB primaries, D65 white
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

# D65 reference white (2 degree observer)
D65_WHITE = (0.95047, 1.0, 1.08883)

# CIE Lab piecewise function
LAB_DELTA = 6.0 / 29.0
LAB_DELTA_SQUARED = LAB_DELTA ** 2
LAB_DELTA_CUBED = LAB_DELTA ** 3
LAB_OFFSET = 4.0 / 29.0

# Rec. 709 luma weights for RGB -> grey. They sum to 1 and agree with the
# Y row of RGB_TO_XYZ to within 1e-4, not exactly.
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# RGB chroma (max - min) below this counts as grey, whose hue is 0
ACHROMATIC_THRESHOLD = 1e-12
