from __future__ import annotations

from abc import ABC
from typing import Any, Callable, ClassVar, Iterator, Optional, Sequence, Tuple, Type, TypeVar

import numpy as np

from ..conversions import convert
from ..errors import ColourParsingError, InvalidColourError
from ..types.color_types import Channel, ColorSpace, HUE_SPACES, ScalarVector
from ..types.format_type import DEFAULT_TOLERANCE, HEX_FORMAT_SPEC, HEX_PREFIX
from ..utils.interpolate_hue import circular_mean_hue, hue_lerp, normalize_hue, shortest_hue_delta
from ..utils.num_utils import is_finite, lerp
from . import codec

C = TypeVar("C", bound="ColorBase")

ALPHA_CHANNEL = Channel("alpha", 0.0, 1.0)


def component(index: int, doc: Optional[str] = None) -> property:
    """Read-only accessor for the component at ``index``."""
    def getter(self: ColorBase) -> float:
        return self._value[index]
    return property(getter, doc=doc)


class ColorBase:
    """
    Immutable tuple of named float components in one colour space.

    Subclasses describe their space through class attributes only:
    ``mode`` (the ColorSpace tag), ``channels`` (name and range of each
    component) and ``byte_space`` (the space written by hex and bytes).
    Conversion logic lives in the conversion graph, not in subclasses.
    """
    __slots__ = ('_value', '_is_frozen')

    mode: ClassVar[ColorSpace]
    channels: ClassVar[Tuple[Channel, ...]]
    byte_space: ClassVar[ColorSpace]
    _type: ClassVar[type] = float

    # attached in color.py once every space class exists
    convert: Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    to_grey: Callable[[ColorBase], ColorBase]
    to_grey_alpha: Callable[[ColorBase], ColorBase]
    to_rgb: Callable[[ColorBase], ColorBase]
    to_rgb_alpha: Callable[[ColorBase], ColorBase]
    to_srgb: Callable[[ColorBase], ColorBase]
    to_srgb_alpha: Callable[[ColorBase], ColorBase]
    to_hsl: Callable[[ColorBase], ColorBase]
    to_hsl_alpha: Callable[[ColorBase], ColorBase]
    to_hsv: Callable[[ColorBase], ColorBase]
    to_hsv_alpha: Callable[[ColorBase], ColorBase]
    to_lab: Callable[[ColorBase], ColorBase]
    to_lab_alpha: Callable[[ColorBase], ColorBase]
    to_xyz: Callable[[ColorBase], ColorBase]
    to_xyz_alpha: Callable[[ColorBase], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Any) -> None:
        # ---- Handle ColorBase input ----
        if len(components) == 1 and isinstance(components[0], ColorBase):
            other = components[0]
            self._store(convert(other.components, other.mode, self.mode))
            return

        if len(components) != len(self.channels):
            raise TypeError(
                f"{self.__class__.__name__} expects {len(self.channels)} components, "
                f"got {len(components)}"
            )
        self._store(self._validate(components))

    def _store(self, value: Sequence[float]) -> None:
        self._value = tuple(self._type(v) for v in value)
        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _validate(cls, components: Sequence[Any]) -> ScalarVector:
        validated = []
        for channel, raw in zip(cls.channels, components):
            v = cls._type(raw)
            if not is_finite(v):
                raise InvalidColourError(channel.name, v)
            if channel.cyclic:
                v = normalize_hue(v)
            elif not channel.minimum <= v <= channel.maximum:
                raise InvalidColourError(channel.name, v, channel.minimum, channel.maximum)
            validated.append(v)
        return tuple(validated)

    @classmethod
    def _from_unchecked(cls: Type[C], components: Sequence[float]) -> C:
        """Build an instance from trusted components, skipping range checks."""
        obj = cls.__new__(cls)
        obj._store(components)
        return obj

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def components(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.has_alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    # ------------------ TEXT ------------------
    def __repr__(self) -> str:
        fields = ", ".join(f"{ch.name}={v!r}" for ch, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __str__(self) -> str:
        return codec.format_components(self._value)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        if format_spec == HEX_FORMAT_SPEC:
            return self.to_hex()
        return codec.format_components(self._value, format_spec)

    def to_string(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls: Type[C], text: str) -> C:
        """
        Parse a colour from a hex string or comma-separated components.

        Args:
            text: "#FF8000" style hex, or e.g. "120, 0.5, 0.25"

        Returns:
            New validated colour

        Raises:
            ColourParsingError: malformed text
            InvalidColourError: a parsed component is out of range
        """
        if not isinstance(text, str):
            raise ColourParsingError(text, "expected a string")
        if text.strip().startswith(HEX_PREFIX):
            return cls.from_hex(text)
        return cls(*codec.parse_components(text, len(cls.channels)))

    # ------------------ HEX / BYTES ------------------
    @classmethod
    def _byte_arity(cls) -> int:
        return cls.byte_space.num_channels

    @classmethod
    def from_bytes(cls: Type[C], data: Sequence[int]) -> C:
        """
        Build a colour from bytes in its byte space.

        Grey reads one byte (two with alpha); every other space reads RGB
        bytes (RGBA with alpha), converting through RGB when needed.

        Raises:
            ColourParsingError: wrong length or a value outside [0, 255]
        """
        units = codec.bytes_to_units(codec.validate_bytes(data, cls._byte_arity()))
        if cls.byte_space == cls.mode:
            return cls(*units)
        return cls._from_unchecked(convert(units, cls.byte_space, cls.mode))

    @classmethod
    def from_hex(cls: Type[C], text: str) -> C:
        """
        Parse a hex colour such as "#FF8000", "ff8000cc" or "#F80".

        Raises:
            ColourParsingError: wrong length or non-hex characters
        """
        return cls.from_bytes(codec.parse_hex(text, cls._byte_arity()))

    def to_bytes(self) -> Tuple[int, ...]:
        """Bytes in the byte space, rounded to nearest and clamped to [0, 255]."""
        if self.byte_space == self.mode:
            units = self._value
        else:
            units = convert(self._value, self.mode, self.byte_space)
        return codec.units_to_bytes(units)

    def to_hex(self) -> str:
        return codec.format_hex(self.to_bytes())

    def to_rgb_bytes(self) -> Tuple[int, int, int]:
        """The (r, g, b) byte triple of this colour, for external renderers."""
        r, g, b = codec.units_to_bytes(convert(self._value, self.mode, ColorSpace.RGB))
        return r, g, b

    # ------------------ ARITHMETIC ------------------
    def _check_same_class(self, other: object, operation: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot {operation} {self.__class__.__name__} with {type(other).__name__}"
            )

    def lerp(self: C, other: C, t: float) -> C:
        """
        Interpolate towards another colour of the same class.

        Hue channels travel along the shorter arc. ``t`` is not clamped, so
        values outside [0, 1] extrapolate and the result is not range checked.

        Args:
            other: End colour (t = 1)
            t: Interpolation coefficient

        Returns:
            New colour of the same class
        """
        self._check_same_class(other, "interpolate")
        result = tuple(
            hue_lerp(a, b, t) if ch.cyclic else lerp(a, b, t)
            for ch, a, b in zip(self.channels, self._value, other._value)
        )
        return self._from_unchecked(result)

    @classmethod
    def mix(cls: Type[C], colours: Sequence[C], weights: Sequence[float]) -> C:
        """
        Weighted sum of several colours of this class.

        Weights are not normalised. Hue channels use the weighted circular
        mean instead of a plain sum.

        Args:
            colours: Colours to combine, all instances of this class
            weights: One non-negative weight per colour

        Returns:
            New colour of this class
        """
        colours = list(colours)
        weights = list(weights)
        if not colours:
            raise ValueError("Cannot mix an empty list of colours")
        if len(colours) != len(weights):
            raise ValueError(
                f"Colour and weight lists have different lengths: "
                f"{len(colours)} colours, {len(weights)} weights"
            )
        for colour in colours:
            if type(colour) is not cls:
                raise TypeError(f"Cannot mix {type(colour).__name__} into {cls.__name__}")
        w = np.asarray(weights, dtype=float)
        if not np.all(np.isfinite(w)) or np.any(w < 0):
            raise ValueError(f"Weights must be finite and non-negative, got {weights!r}")

        values = np.array([colour.components for colour in colours], dtype=float)
        result = (w @ values).tolist()
        for i, channel in enumerate(cls.channels):
            if channel.cyclic:
                result[i] = circular_mean_hue(values[:, i], w)
        return cls._from_unchecked(result)

    def isclose(self, other: ColorBase, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """
        Component-wise approximate equality, comparing hue cyclically.

        Args:
            other: Colour of the same class
            tolerance: Largest allowed absolute difference per component

        Returns:
            True if every component is within tolerance
        """
        self._check_same_class(other, "compare")
        for ch, a, b in zip(self.channels, self._value, other._value):
            diff = shortest_hue_delta(a, b) if ch.cyclic else b - a
            if abs(diff) > tolerance:
                return False
        return True


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    channels: ClassVar[Tuple[Channel, ...]]
    mode: ClassVar[ColorSpace]
    components: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        """Get alpha channel value."""
        return self.components[self.alpha_index]

    def with_alpha(self, alpha: float) -> ColorBase:
        """Return a copy of this colour with alpha replaced."""
        return type(self)(*self.components[:self.alpha_index], alpha)  # type: ignore[call-arg]

    def without_alpha(self) -> ColorBase:
        """Return the same colour in the alpha-free variant of this space."""
        return self.convert(self.mode.base)  # type: ignore[attr-defined]


def build_registry(*classes: Type[ColorBase]) -> dict[ColorSpace, Type[ColorBase]]:
    """Map each class's ColorSpace tag to the class."""
    return {cls.mode: cls for cls in classes}

