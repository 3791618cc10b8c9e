import math

from ..types.format_type import BYTE_MAX


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation ``a + (b - a) * t``; ``t`` is not clamped."""
    return a + (b - a) * t


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to the inclusive range [lower, upper]."""
    return max(lower, min(value, upper))


def unit_to_byte(value: float) -> int:
    """Map a [0, 1] value to the nearest byte, clamping the extremes."""
    # half away from zero, not round()'s half-to-even
    return int(clamp(math.floor(value * BYTE_MAX + 0.5), 0, BYTE_MAX))


def byte_to_unit(byte: int) -> float:
    """Map a byte to [0, 1]."""
    return byte / BYTE_MAX


def is_finite(value: float) -> bool:
    """Check that value is a real number (not NaN or infinite)."""
    return not (math.isnan(value) or math.isinf(value))
