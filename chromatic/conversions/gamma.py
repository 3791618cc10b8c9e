from .constants import (
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
)


def gamma_encode(linear: float) -> float:
    """
    Apply the sRGB transfer function to a linear channel.

    Args:
        linear: Linear-light channel in [0, 1]

    Returns:
        Gamma-encoded channel in [0, 1]
    """
    if linear <= SRGB_ENCODE_THRESHOLD:
        return SRGB_LINEAR_SLOPE * linear
    return SRGB_SCALE * linear ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET


def gamma_decode(encoded: float) -> float:
    """
    Invert the sRGB transfer function.

    Args:
        encoded: Gamma-encoded channel in [0, 1]

    Returns:
        Linear-light channel in [0, 1]
    """
    if encoded <= SRGB_DECODE_THRESHOLD:
        return encoded / SRGB_LINEAR_SLOPE
    return ((encoded + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def rgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Gamma-encode linear RGB into sRGB."""
    return gamma_encode(r), gamma_encode(g), gamma_encode(b)


def srgb_to_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Decode sRGB into linear RGB."""
    return gamma_decode(r), gamma_decode(g), gamma_decode(b)
