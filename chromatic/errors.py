"""Exceptions raised by chromatic.

All library errors inherit from ChromaticError so callers can catch every
validation failure in one place. ChromaticError subclasses ValueError, which
keeps ``except ValueError`` working for code that predates the hierarchy.

- InvalidColourError: a component is outside its space's valid range
- ColourParsingError: malformed hex, byte or comma-separated input
- InvalidColourMapError: a colour map's stops are inconsistent
"""

from __future__ import annotations

from typing import Optional


class ChromaticError(ValueError):
    """Base exception for all chromatic errors."""


class InvalidColourError(ChromaticError):
    """
    A colour component is outside the valid range of its space.

    Attributes:
        component: Name of the offending component (e.g. "red", "hue")
        value: The rejected value
        minimum: Lower bound of the valid range
        maximum: Upper bound of the valid range
    """

    def __init__(
        self,
        component: str,
        value: float,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ):
        if minimum is None or maximum is None:
            message = f"Invalid {component} component: {value!r}"
        else:
            message = (
                f"Invalid {component} component: {value!r} "
                f"(expected a value in [{minimum}, {maximum}])"
            )
        super().__init__(message)
        self.component = component
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ColourParsingError(ChromaticError):
    """
    Text or bytes could not be parsed into a colour.

    Attributes:
        text: The input that failed to parse
        reason: Short description of what was wrong with it
    """

    def __init__(self, text: object, reason: str):
        super().__init__(f"Cannot parse colour from {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidColourMapError(ChromaticError):
    """The colours and positions given to a ColourMap are inconsistent."""
