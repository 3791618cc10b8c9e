import numpy as np

from .constants import D65_WHITE, LAB_DELTA, LAB_DELTA_SQUARED, LAB_OFFSET, RGB_TO_XYZ


def rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert linear RGB to CIE XYZ (D65).

    The input must be linear; decode sRGB first.

    Args:
        r, g, b: Linear channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    x, y, z = (RGB_TO_XYZ @ np.array([r, g, b], dtype=np.float64)).tolist()
    return x, y, z


def _lab_f_inverse(t: float) -> float:
    if t > LAB_DELTA:
        return t ** 3
    return 3.0 * LAB_DELTA_SQUARED * (t - LAB_OFFSET)


def lab_to_xyz(
    l: float,
    a: float,
    b: float,
    white: tuple[float, float, float] = D65_WHITE,
) -> tuple[float, float, float]:
    """
    Convert CIE Lab to XYZ.

    Args:
        l: Lightness L* in [0, 100]
        a: a* (green to red)
        b: b* (blue to yellow)
        white: Reference white, D65 by default

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    xn, yn, zn = white
    return xn * _lab_f_inverse(fx), yn * _lab_f_inverse(fy), zn * _lab_f_inverse(fz)
