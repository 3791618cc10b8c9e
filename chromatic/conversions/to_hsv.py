from ..utils.interpolate_hue import normalize_hue
from .constants import ACHROMATIC_THRESHOLD


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue of a chromatic RGB colour using the 60 degree sector formula.

    The sector is chosen by whichever channel is maximal. Shared by the
    HSL and HSV conversions, which differ only in saturation and lightness.

    Args:
        r, g, b: Channels in [0, 1]
        max_c: max(r, g, b)
        delta: max(r, g, b) - min(r, g, b), must be non-zero

    Returns:
        Hue in degrees [0, 360)
    """
    if max_c == r:
        hue = 60.0 * ((g - b) / delta)
    elif max_c == g:
        hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        hue = 60.0 * ((r - g) / delta + 4.0)
    return normalize_hue(hue)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta < ACHROMATIC_THRESHOLD:
        return 0.0, 0.0, max_c

    return rgb_hue(r, g, b, max_c, delta), delta / max_c, max_c


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to HSV without going through RGB.

    Hue is carried over unless the colour is achromatic, in which case it
    is 0 as on the RGB route.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, saturation, value)
    """
    chroma = 2.0 * s * min(l, 1.0 - l)
    value = l + chroma / 2.0
    if chroma < ACHROMATIC_THRESHOLD:
        return 0.0, 0.0, value
    return normalize_hue(h), chroma / value, value
