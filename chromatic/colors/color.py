from __future__ import annotations

from typing import Type, TypeVar, Union

from ..conversions import convert
from ..types.color_types import ColorMode, ColorSpace, to_color_space
from .color_base import ColorBase
from .grey import grey_space_to_class
from .hsl import hsl_space_to_class
from .hsv import hsv_space_to_class
from .lab import lab_space_to_class
from .rgb import rgb_space_to_class
from .srgb import srgb_space_to_class
from .xyz import xyz_space_to_class

C = TypeVar("C", bound=ColorBase)

unified_space_to_class: dict[ColorSpace, Type[ColorBase]] = {
    **grey_space_to_class,
    **rgb_space_to_class,
    **srgb_space_to_class,
    **hsl_space_to_class,
    **hsv_space_to_class,
    **lab_space_to_class,
    **xyz_space_to_class,
}

ColorTarget = Union[Type[ColorBase], ColorMode]


def color_class(target: ColorTarget) -> Type[ColorBase]:
    """
    Resolve a colour class from a class, ColorSpace or space name.

    Args:
        target: e.g. Hsl, ColorSpace.HSL or "hsl"

    Returns:
        The colour class for that space
    """
    if isinstance(target, type) and issubclass(target, ColorBase):
        return target
    return unified_space_to_class[to_color_space(target)]


def color_convert(self: ColorBase, target: ColorTarget) -> ColorBase:
    """
    Convert this color to another color space.

    Alpha is carried over when both spaces have it, set to 1.0 when only the
    target has it, and dropped when only this colour has it.

    Args:
        target: Target class or space, e.g. Lab, "hsla", ColorSpace.XYZ

    Returns:
        New ColorBase instance in the target space
    """
    cls = color_class(target)
    if cls is type(self):
        return self
    return cls._from_unchecked(convert(self.components, self.mode, cls.mode))


def with_alpha(self: ColorBase, alpha: float = 1.0) -> ColorBase:
    """
    Return the alpha variant of this colour with the given alpha.

    Args:
        alpha: Alpha in [0, 1], fully opaque by default

    Returns:
        New ColorBase instance with an alpha channel.
    """
    cls = unified_space_to_class[self.mode.with_alpha]
    return cls(*self.components, alpha)


def _make_to_space(space: ColorSpace):
    def to_space(self: ColorBase) -> ColorBase:
        return color_convert(self, space)

    name = space.base.value
    to_space.__name__ = f"to_{name}_alpha" if space.has_alpha else f"to_{name}"
    to_space.__doc__ = f"Convert to {unified_space_to_class[space].__name__}."
    return to_space


def lerp(start: C, end: C, t: float) -> C:
    """Interpolate between two colours of the same class; see ColorBase.lerp."""
    return start.lerp(end, t)


ColorBase.convert = color_convert  # type: ignore[assignment]
ColorBase.with_alpha = with_alpha  # type: ignore[assignment]
for _space in ColorSpace:
    _method = _make_to_space(_space)
    setattr(ColorBase, _method.__name__, _method)
