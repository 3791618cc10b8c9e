"""Hex, byte and comma-separated text forms of colour components."""

from __future__ import annotations

import operator
import string
from typing import Iterable, Sequence, Tuple

from ..errors import ColourParsingError
from ..types.format_type import BYTE_MAX, COMPONENT_SEPARATOR, HEX_PREFIX, HexLength
from ..utils.num_utils import byte_to_unit, unit_to_byte

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex(text: str, num_channels: int) -> Tuple[int, ...]:
    """
    Parse a hex colour string into bytes.

    Accepts ``num_channels`` byte pairs, or the short form with one digit per
    channel (each digit doubled, so ``F`` means ``FF``). The leading ``#`` is
    optional, case is ignored and surrounding whitespace is stripped.

    Args:
        text: Hex string, e.g. "#FF8000", "ff8000", "#F80"
        num_channels: Expected number of channels

    Returns:
        Tuple of bytes, one per channel

    Raises:
        ColourParsingError: wrong length or non-hex characters
    """
    if not isinstance(text, str):
        raise ColourParsingError(text, "expected a hex string")

    digits = text.strip()
    if digits.startswith(HEX_PREFIX):
        digits = digits[len(HEX_PREFIX):]

    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ColourParsingError(text, "contains non-hex characters")

    if len(digits) == num_channels * HexLength.LONG:
        width = HexLength.LONG
    elif len(digits) == num_channels * HexLength.SHORT:
        width = HexLength.SHORT
    else:
        raise ColourParsingError(
            text,
            f"expected {num_channels * HexLength.LONG} or "
            f"{num_channels * HexLength.SHORT} hex digits, got {len(digits)}",
        )

    values = []
    for i in range(0, len(digits), width):
        chunk = digits[i:i + width]
        if width == HexLength.SHORT:
            chunk = chunk * 2
        values.append(int(chunk, 16))
    return tuple(values)


def format_hex(byte_values: Iterable[int]) -> str:
    """Format bytes as an upper-case ``#`` prefixed hex string."""
    return HEX_PREFIX + "".join(f"{b:02X}" for b in byte_values)


def validate_bytes(data: Sequence[int], num_channels: int) -> Tuple[int, ...]:
    """
    Check a byte sequence has the right length and every value fits a byte.

    Raises:
        ColourParsingError: wrong length or a value outside [0, 255]
    """
    raw = tuple(data)
    if len(raw) != num_channels:
        raise ColourParsingError(data, f"expected {num_channels} bytes, got {len(raw)}")
    values = []
    for v in raw:
        # any integral type, numpy integers included
        try:
            b = operator.index(v)
        except TypeError:
            raise ColourParsingError(data, f"{v!r} is not a byte") from None
        if isinstance(v, bool) or not 0 <= b <= BYTE_MAX:
            raise ColourParsingError(data, f"{v!r} is not a byte")
        values.append(b)
    return tuple(values)


def bytes_to_units(byte_values: Iterable[int]) -> Tuple[float, ...]:
    return tuple(byte_to_unit(b) for b in byte_values)


def units_to_bytes(components: Iterable[float]) -> Tuple[int, ...]:
    return tuple(unit_to_byte(c) for c in components)


def parse_components(text: str, num_channels: int) -> Tuple[float, ...]:
    """
    Parse comma-separated numbers, e.g. ``"120, 0.5, 0.25"``.

    Raises:
        ColourParsingError: wrong number of values or a non-numeric token
    """
    if not isinstance(text, str):
        raise ColourParsingError(text, "expected a string")

    tokens = [token.strip() for token in text.split(COMPONENT_SEPARATOR)]
    if len(tokens) != num_channels:
        raise ColourParsingError(
            text, f"expected {num_channels} comma-separated values, got {len(tokens)}"
        )

    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            raise ColourParsingError(text, f"{token!r} is not a number") from None
    return tuple(values)


def format_components(components: Iterable[float], spec: str = ".10g") -> str:
    """Join components with ``", "`` applying a format spec to each one."""
    return f"{COMPONENT_SEPARATOR} ".join(format(c, spec) for c in components)
