from .interpolate_hue import circular_mean_hue, hue_lerp, normalize_hue, shortest_hue_delta
from .num_utils import byte_to_unit, clamp, is_finite, lerp, unit_to_byte

__all__ = [
    "circular_mean_hue",
    "hue_lerp",
    "normalize_hue",
    "shortest_hue_delta",
    "byte_to_unit",
    "clamp",
    "is_finite",
    "lerp",
    "unit_to_byte",
]
