"""
Hue arithmetic on the circular [0, 360) domain.

Hue channels cannot be interpolated like the other components: the path
from 350 degrees to 10 degrees passes through 0, not through 180. These helpers
implement the shortest-arc interpolation used by ``lerp`` and the weighted
circular mean used by ``mix``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..types.format_type import HUE_360, HUE_HALF_TURN


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # -1e-17 % 360 == 360.0 in floating point
    if h >= HUE_360:
        h -= HUE_360
    return h


def shortest_hue_delta(h0: float, h1: float) -> float:
    """
    Signed angular difference from h0 to h1 along the shorter arc.

    Args:
        h0: Start hue in degrees
        h1: End hue in degrees

    Returns:
        Difference in (-180, 180]
    """
    delta = h1 - h0
    if delta > HUE_HALF_TURN:
        delta -= HUE_360
    elif delta < -HUE_HALF_TURN:
        delta += HUE_360
    return delta


def hue_lerp(h0: float, h1: float, t: float) -> float:
    """
    Interpolate between two hues along the shorter arc.

    ``t`` is not clamped: values outside [0, 1] extrapolate around the circle.

    Args:
        h0: Start hue in degrees [0, 360)
        h1: End hue in degrees [0, 360)
        t: Interpolation coefficient

    Returns:
        Interpolated hue in [0, 360)
    """
    return normalize_hue(h0 + shortest_hue_delta(h0, h1) * t)


def circular_mean_hue(hues: Sequence[float], weights: Sequence[float]) -> float:
    """
    Weighted mean of hue angles.

    Sums the weighted unit vectors of each hue and returns the angle of the
    resultant. A zero resultant (e.g. two opposite hues with equal weight)
    has no direction and yields hue 0.

    Args:
        hues: Hue angles in degrees
        weights: One weight per hue

    Returns:
        Mean hue in [0, 360)
    """
    radians = np.radians(np.asarray(hues, dtype=float))
    w = np.asarray(weights, dtype=float)
    x = float(np.sum(w * np.cos(radians)))
    y = float(np.sum(w * np.sin(radians)))
    if math.isclose(x, 0.0, abs_tol=1e-12) and math.isclose(y, 0.0, abs_tol=1e-12):
        return 0.0
    return normalize_hue(math.degrees(math.atan2(y, x)))
