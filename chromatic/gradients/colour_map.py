from __future__ import annotations

import logging
import math
import warnings
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, Type, TypeVar, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import ColorTarget, color_class, unified_space_to_class
from ..colors.color_base import ColorBase
from ..errors import InvalidColourMapError
from ..types.transform_types import Interpolator, UnitTransform
from ..utils.num_utils import is_finite

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=ColorBase)

Stop = Tuple[ColorBase, float]


class ColourMap(Generic[C]):
    """
    Colours pinned at increasing positions, sampled by interpolation.

    Sampling a position between two stops interpolates their colours in the
    map's colour space (hue along the shorter arc). Positions before the
    first stop or after the last one clamp to the end colours.

    Example:
        >>> cmap = ColourMap([Rgb(1, 0, 0), Rgb(0, 1, 0), Rgb(0, 0, 1)], [0.0, 0.5, 1.0])
        >>> cmap.sample(0.25)
        Rgb(r=0.5, g=0.5, b=0.0)
    """

    __slots__ = ('_colours', '_positions', '_colour_class')

    def __init__(self, colours: Sequence[C], positions: Optional[Sequence[float]] = None) -> None:
        """
        Args:
            colours: At least two colours, all of the same class
            positions: One finite position per colour, strictly increasing.
                Spaced uniformly over [0, 1] when omitted.

        Raises:
            InvalidColourMapError: the stops are inconsistent
        """
        colours = tuple(colours)
        if len(colours) < 2:
            raise InvalidColourMapError(f"A colour map needs at least 2 colours, got {len(colours)}")
        for colour in colours:
            if not isinstance(colour, ColorBase):
                raise TypeError(f"Expected colours, got {type(colour).__name__}")

        colour_class = type(colours[0])
        for colour in colours[1:]:
            if type(colour) is not colour_class:
                raise InvalidColourMapError(
                    f"All colours must have the same class: got {colour_class.__name__} "
                    f"and {type(colour).__name__}"
                )

        if positions is None:
            positions = [i / (len(colours) - 1) for i in range(len(colours))]
        positions = [float(p) for p in positions]

        if len(positions) != len(colours):
            raise InvalidColourMapError(
                f"Colours and positions have different lengths: "
                f"{len(colours)} colours, {len(positions)} positions"
            )
        for p in positions:
            if not is_finite(p):
                raise InvalidColourMapError(f"Position {p!r} is not finite")
        for previous, current in zip(positions, positions[1:]):
            if not current > previous:
                raise InvalidColourMapError(
                    f"Positions must be strictly increasing: {previous!r} is followed by {current!r}"
                )

        pos = np.array(positions, dtype=float)
        pos.flags.writeable = False

        self._colours: Tuple[C, ...] = colours
        self._positions: NDArray = pos
        self._colour_class: Type[C] = colour_class
        logger.debug(
            "Built colour map of %d %s stops over [%g, %g]",
            len(colours), colour_class.__name__, positions[0], positions[-1],
        )

    @classmethod
    def uniform(cls, colours: Sequence[C]) -> ColourMap[C]:
        """Colour map with positions spaced evenly over [0, 1] (``i / (n - 1)``)."""
        return cls(colours)

    @classmethod
    def new_uniform(cls, colours: Sequence[C]) -> ColourMap[C]:
        """Deprecated alias of ``uniform``."""
        warnings.warn(
            "ColourMap.new_uniform is deprecated. Use ColourMap.uniform instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.uniform(colours)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colours(self) -> Tuple[C, ...]:
        return self._colours

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(self._positions.tolist())

    @property
    def colour_class(self) -> Type[C]:
        return self._colour_class

    @property
    def domain(self) -> Tuple[float, float]:
        """(first, last) stop positions."""
        return float(self._positions[0]), float(self._positions[-1])

    def __len__(self) -> int:
        return len(self._colours)

    def __getitem__(self, index: int) -> Stop:
        return self._colours[index], float(self._positions[index])

    def __iter__(self) -> Iterator[Stop]:
        return iter(zip(self._colours, self._positions.tolist()))

    def __repr__(self) -> str:
        stops = ", ".join(f"({c!r}, {p!r})" for c, p in self)
        return f"{self.__class__.__name__}([{stops}])"

    def reversed(self) -> ColourMap[C]:
        """Same stops in the opposite order, positions mirrored over the domain."""
        first, last = self.domain
        mirrored = [first + last - p for p in reversed(self._positions.tolist())]
        return type(self)(self._colours[::-1], mirrored)

    # ------------------ SAMPLING ------------------
    def _interpolation_class(self, space: ColorTarget) -> Type[ColorBase]:
        target = color_class(space)
        # keep alpha when the map has it
        if target.mode.has_alpha != self._colour_class.mode.has_alpha:
            mode = target.mode.with_alpha if self._colour_class.mode.has_alpha else target.mode.base
            target = unified_space_to_class[mode]
        return target

    def _blend(
        self,
        start: C,
        end: C,
        fraction: float,
        interpolate: Optional[Interpolator],
        unit_transform: Optional[UnitTransform],
        space: Optional[Type[ColorBase]],
    ) -> C:
        if unit_transform is not None:
            fraction = unit_transform(fraction)
        if space is not None:
            start, end = start.convert(space), end.convert(space)
        if interpolate is not None:
            result = interpolate(start, end, fraction)
        else:
            result = start.lerp(end, fraction)
        if space is not None:
            result = result.convert(self._colour_class)
        return result  # type: ignore[return-value]

    def _sample_bracket(
        self,
        t: float,
        index: int,
        interpolate: Optional[Interpolator],
        unit_transform: Optional[UnitTransform],
        space: Optional[Type[ColorBase]],
    ) -> C:
        pos = self._positions
        if t <= pos[0]:
            return self._colours[0]
        if t >= pos[-1]:
            return self._colours[-1]
        if t == pos[index]:
            return self._colours[index]
        fraction = float((t - pos[index]) / (pos[index + 1] - pos[index]))
        return self._blend(
            self._colours[index], self._colours[index + 1], fraction,
            interpolate, unit_transform, space,
        )

    def _brackets(self, t: Union[float, NDArray]) -> NDArray:
        # index i such that positions[i] <= t < positions[i + 1]
        idx = np.searchsorted(self._positions, t, side="right") - 1
        return np.clip(idx, 0, len(self._positions) - 2)

    def sample(
        self,
        t: float,
        interpolate: Optional[Interpolator] = None,
        unit_transform: Optional[UnitTransform] = None,
        space: Optional[ColorTarget] = None,
    ) -> C:
        """
        Colour at position t.

        Args:
            t: Query position; clamped to the domain
            interpolate: Blending function ``(start, end, fraction) -> colour``
                used instead of ``lerp``
            unit_transform: Easing applied to the fraction within the segment
            space: Interpolate in another space (class, ColorSpace or name);
                the result is converted back to the map's class

        Returns:
            Colour of the map's class

        Raises:
            ValueError: t is NaN
        """
        t = float(t)
        if math.isnan(t):
            raise ValueError("Cannot sample a colour map at NaN")
        target = None if space is None else self._interpolation_class(space)
        index = int(self._brackets(t))
        return self._sample_bracket(t, index, interpolate, unit_transform, target)

    def sample_n(
        self,
        k: int,
        interpolate: Optional[Interpolator] = None,
        unit_transform: Optional[UnitTransform] = None,
        space: Optional[ColorTarget] = None,
    ) -> List[C]:
        """
        k colours evenly spaced over the domain, endpoints included.

        Same result as calling ``sample`` at ``numpy.linspace(first, last, k)``.
        ``k == 1`` gives the first colour and ``k == 0`` an empty list.

        Raises:
            ValueError: k is negative
        """
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise TypeError(f"k must be an integer, got {type(k).__name__}")
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        if k == 0:
            return []
        if k == 1:
            return [self._colours[0]]

        target = None if space is None else self._interpolation_class(space)
        first, last = self.domain
        ts = np.linspace(first, last, int(k))
        indices = self._brackets(ts)
        return [
            self._sample_bracket(float(t), int(i), interpolate, unit_transform, target)
            for t, i in zip(ts, indices)
        ]

    def to_array(self, k: int, **kwargs) -> NDArray:
        """
        ``sample_n(k)`` as a float array of shape (k, number of components).

        Keyword arguments are passed on to ``sample_n``.
        """
        samples = self.sample_n(k, **kwargs)
        width = len(self._colour_class.channels)
        return np.array([c.components for c in samples], dtype=float).reshape(len(samples), width)
