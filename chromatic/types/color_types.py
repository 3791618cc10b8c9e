from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple, Union

ScalarVector = Tuple[float, ...]


class ColorSpace(str, Enum):
    GREY = "grey"
    GREYA = "greya"
    RGB = "rgb"
    RGBA = "rgba"
    SRGB = "srgb"
    SRGBA = "srgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    LAB = "lab"
    LABA = "laba"
    XYZ = "xyz"
    XYZA = "xyza"

    @property
    def has_alpha(self) -> bool:
        return self.value.endswith("a")

    @property
    def base(self) -> "ColorSpace":
        """The same space without its alpha channel."""
        if self.has_alpha:
            return ColorSpace(self.value[:-1])
        return self

    @property
    def with_alpha(self) -> "ColorSpace":
        """The same space with an alpha channel."""
        if self.has_alpha:
            return self
        return ColorSpace(self.value + "a")

    @property
    def num_channels(self) -> int:
        """Number of components, alpha included."""
        count = 1 if self.base == ColorSpace.GREY else 3
        return count + 1 if self.has_alpha else count


ColorMode = Union[ColorSpace, str]

HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSLA, ColorSpace.HSV, ColorSpace.HSVA}


class Channel(NamedTuple):
    """
    Description of one colour component.

    Attributes:
        name: Component name used in accessors and error messages
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound (exclusive for cyclic channels)
        cyclic: True for hue, which wraps around instead of being rejected
    """
    name: str
    minimum: float
    maximum: float
    cyclic: bool = False


def to_color_space(space: ColorMode) -> ColorSpace:
    """
    Coerce a string or ColorSpace into a ColorSpace.

    Args:
        space: Space name, case-insensitive (e.g. "rgb", "HSLA")

    Returns:
        The matching ColorSpace member
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(space.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: ColorMode) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
