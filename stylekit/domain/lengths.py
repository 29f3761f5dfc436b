"""
Length values for breakpoint widths

Provides:
    - Length: immutable magnitude + unit pair
    - parse_length(): tolerant parser for "700px", "48em", 700
"""

import re
from dataclasses import dataclass

from stylekit.validation import ConfigError

_LENGTH_PATTERN = re.compile(r"^\s*(-?(?:\d+\.?\d*|\.\d+))\s*([a-zA-Z%]*)\s*$")

DEFAULT_UNIT = "px"


@dataclass(frozen=True)
class Length:
    """
    A numeric width with a unit.

    Attributes:
        value: Magnitude (int when integral, otherwise float)
        unit: Unit suffix such as "px" or "em"

    Example:
        >>> str(Length(700, "px").minus_one())
        '699px'
    """

    value: int | float
    unit: str = DEFAULT_UNIT

    def minus_one(self) -> "Length":
        """Return the same length reduced by exactly one unit."""
        return Length(_normalize(self.value - 1), self.unit)

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"


def _normalize(value: int | float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_length(raw: str | int | float | Length) -> Length:
    """
    Parse a width into a Length.

    Plain numbers are treated as pixels.

    Args:
        raw: Width as given by the caller

    Returns:
        Parsed Length

    Raises:
        ConfigError: If the width is not a number with an optional unit

    Example:
        >>> parse_length("48.5em")
        Length(value=48.5, unit='em')
        >>> parse_length(1024)
        Length(value=1024, unit='px')
    """
    if isinstance(raw, Length):
        return raw
    if isinstance(raw, bool):
        raise ConfigError(f"Invalid breakpoint width: {raw!r}")
    if isinstance(raw, (int, float)):
        return Length(_normalize(raw), DEFAULT_UNIT)
    if not isinstance(raw, str):
        raise ConfigError(f"Invalid breakpoint width: {raw!r}")

    match = _LENGTH_PATTERN.match(raw)
    if not match:
        raise ConfigError(f"Invalid breakpoint width: '{raw}'")

    number, unit = match.groups()
    value = float(number) if "." in number else int(number)
    return Length(_normalize(value), unit.lower() or DEFAULT_UNIT)
