from .constants import LUMA_WEIGHTS


def rgb_to_grey(r: float, g: float, b: float) -> tuple[float]:
    """
    Luminance of linear RGB using the Rec. 709 weights.

    Returns:
        Tuple[float]: (grey,) in [0, 1]
    """
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b,)
