from .constants import D65_WHITE, LAB_DELTA_CUBED, LAB_DELTA_SQUARED, LAB_OFFSET


def _lab_f(t: float) -> float:
    # cube root above delta**3, linear segment below
    if t > LAB_DELTA_CUBED:
        return t ** (1.0 / 3.0)
    return t / (3.0 * LAB_DELTA_SQUARED) + LAB_OFFSET


def xyz_to_lab(
    x: float,
    y: float,
    z: float,
    white: tuple[float, float, float] = D65_WHITE,
) -> tuple[float, float, float]:
    """
    Convert CIE XYZ to Lab relative to a reference white.

    Args:
        x, y, z: Tristimulus values
        white: Reference white, D65 by default

    Returns:
        Tuple[float, float, float]: (L* [0,100], a*, b*)
    """
    xn, yn, zn = white
    fx = _lab_f(x / xn)
    fy = _lab_f(y / yn)
    fz = _lab_f(z / zn)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)
