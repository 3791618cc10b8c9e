"""
Conversion graph between colour spaces.

Every direct transform is registered as an edge between two base (alpha-free)
spaces. Conversions between spaces without a direct edge follow the shortest
path through the graph, so RGB acts as the hub for HSL, HSV, sRGB and grey,
and XYZ as the hub for Lab. Paths are resolved once and cached.

Alpha is handled here, not by the edges: it passes through unchanged,
defaults to fully opaque when the source has none, and is dropped when the
target has none.
"""

from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Callable, Dict, Tuple

from ..types.color_types import ColorMode, ColorSpace, ScalarVector, to_color_space
from .gamma import rgb_to_srgb, srgb_to_rgb
from .to_grey import rgb_to_grey
from .to_hsl import hsv_to_hsl, unit_rgb_to_hsl
from .to_hsv import hsl_to_hsv, unit_rgb_to_hsv
from .to_lab import xyz_to_lab
from .to_rgb import grey_to_rgb, hsl_to_unit_rgb, hsv_to_unit_rgb, xyz_to_rgb
from .to_xyz import lab_to_xyz, rgb_to_xyz

logger = logging.getLogger(__name__)

Edge = Callable[..., ScalarVector]

OPAQUE = 1.0

CONVERSION_EDGES: Dict[Tuple[ColorSpace, ColorSpace], Edge] = {
    (ColorSpace.RGB, ColorSpace.SRGB): rgb_to_srgb,
    (ColorSpace.SRGB, ColorSpace.RGB): srgb_to_rgb,
    (ColorSpace.RGB, ColorSpace.HSL): unit_rgb_to_hsl,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_unit_rgb,
    (ColorSpace.RGB, ColorSpace.HSV): unit_rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_unit_rgb,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.RGB, ColorSpace.XYZ): rgb_to_xyz,
    (ColorSpace.XYZ, ColorSpace.RGB): xyz_to_rgb,
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
    (ColorSpace.RGB, ColorSpace.GREY): rgb_to_grey,
    (ColorSpace.GREY, ColorSpace.RGB): grey_to_rgb,
}


@lru_cache(maxsize=None)
def conversion_path(from_space: ColorSpace, to_space: ColorSpace) -> Tuple[ColorSpace, ...]:
    """
    Shortest sequence of base spaces leading from one space to another.

    Args:
        from_space: Source space (alpha is ignored)
        to_space: Target space (alpha is ignored)

    Returns:
        Tuple of spaces starting with from_space and ending with to_space
    """
    start, goal = from_space.base, to_space.base
    previous: Dict[ColorSpace, ColorSpace] = {}
    queue = deque([start])
    seen = {start}

    while queue:
        node = queue.popleft()
        if node == goal:
            break
        for (src, dst) in CONVERSION_EDGES:
            if src == node and dst not in seen:
                seen.add(dst)
                previous[dst] = node
                queue.append(dst)
    else:
        raise ValueError(f"No conversion path from {start.value} to {goal.value}")

    path = [goal]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    logger.debug("Resolved conversion path %s", " -> ".join(s.value for s in path))
    return tuple(path)


def _convert_base(color: ScalarVector, from_space: ColorSpace, to_space: ColorSpace) -> ScalarVector:
    path = conversion_path(from_space, to_space)
    result = tuple(color)
    for src, dst in zip(path, path[1:]):
        result = tuple(CONVERSION_EDGES[(src, dst)](*result))
    return result


def convert(color: ScalarVector, from_space: ColorMode, to_space: ColorMode) -> ScalarVector:
    """
    Convert colour components between any two spaces.

    Args:
        color: Component tuple in from_space (alpha last when present)
        from_space: Source space, e.g. "rgb", "hsla", ColorSpace.LAB
        to_space: Target space

    Returns:
        Component tuple in to_space
    """
    src = to_color_space(from_space)
    dst = to_color_space(to_space)

    if src.has_alpha:
        base, alpha = tuple(color[:-1]), color[-1]
    else:
        base, alpha = tuple(color), OPAQUE

    converted = _convert_base(base, src, dst)

    if dst.has_alpha:
        return converted + (alpha,)
    return converted
