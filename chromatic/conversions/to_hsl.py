from ..utils.interpolate_hue import normalize_hue
from .constants import ACHROMATIC_THRESHOLD
from .to_hsv import rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic: hue and saturation are conventionally 0
    if delta < ACHROMATIC_THRESHOLD:
        return 0.0, 0.0, lightness

    saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))
    return rgb_hue(r, g, b, max_c, delta), saturation, lightness


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL without going through RGB.

    Hue is carried over unless the colour is achromatic, in which case it
    is 0 as on the RGB route.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue, saturation, lightness)
    """
    chroma = v * s
    lightness = v - chroma / 2.0
    if chroma < ACHROMATIC_THRESHOLD:
        return 0.0, 0.0, lightness
    return normalize_hue(h), chroma / (1.0 - abs(2.0 * lightness - 1.0)), lightness
