import numpy as np

from ..utils.interpolate_hue import normalize_hue
from .constants import XYZ_TO_RGB


def _chroma_to_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    """Place chroma in the hue sector and lift every channel by m."""
    h_prime = normalize_hue(h) / 60.0
    x = chroma * (1.0 - abs(h_prime % 2.0 - 1.0))
    sector = int(h_prime)

    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    return _chroma_to_rgb(h, chroma, l - chroma / 2.0)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = v * s
    return _chroma_to_rgb(h, chroma, v - chroma)


def xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to linear RGB.

    XYZ values outside the sRGB gamut are clamped into [0, 1].

    Args:
        x, y, z: Tristimulus values

    Returns:
        Tuple[float, float, float]: linear (r, g, b) in [0, 1]
    """
    rgb = XYZ_TO_RGB @ np.array([x, y, z], dtype=np.float64)
    r, g, b = np.clip(rgb, 0.0, 1.0).tolist()
    return r, g, b


def grey_to_rgb(grey: float) -> tuple[float, float, float]:
    """Broadcast a grey intensity to all three channels."""
    return grey, grey, grey
