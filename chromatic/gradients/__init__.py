from .colour_map import ColourMap
from .easing import (
    ease_in_cubic,
    ease_in_out_quad,
    ease_in_quad,
    ease_out_back,
    ease_out_quad,
    eased,
    linear,
    smoothstep,
)

__all__ = [
    "ColourMap",
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "smoothstep",
    "ease_out_back",
    "eased",
]
