"""
Easing functions for colour map segments.

Each function maps a local fraction in [0, 1] to a new fraction, fixing
0 and 1. Pass one as ``unit_transform`` to ``ColourMap.sample``, or wrap
it with ``eased`` to get a blending function for ``interpolate``.
"""

from __future__ import annotations

from ..types.transform_types import Interpolator, UnitTransform

# overshoot used by ease_out_back
BACK_OVERSHOOT = 1.70158


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2.0 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def smoothstep(t: float) -> float:
    """Hermite smoothstep, zero slope at both ends."""
    return t * t * (3.0 - 2.0 * t)


def ease_out_back(t: float) -> float:
    """Overshoots past 1 before settling, so colours may leave their range."""
    s = t - 1.0
    return s * s * ((BACK_OVERSHOOT + 1.0) * s + BACK_OVERSHOOT) + 1.0


def eased(transform: UnitTransform) -> Interpolator:
    """
    Turn an easing function into a blending function.

    Args:
        transform: Easing applied to the fraction before interpolating

    Returns:
        Callable ``(start, end, fraction) -> colour``
    """
    def interpolate(start, end, fraction):
        return start.lerp(end, transform(fraction))

    interpolate.__name__ = f"eased_{getattr(transform, '__name__', 'transform')}"
    return interpolate
