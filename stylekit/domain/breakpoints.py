"""
Breakpoint domain models

Provides:
    - UNSET: explicit marker for an empty slot
    - BreakpointMode: min / max width condition
    - Breakpoint: one resolved breakpoint (base entry has no width)
    - BreakpointSpec: ordered, validated tuple of breakpoints
    - DEFAULT_BREAKPOINTS: the process-wide default spec
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from stylekit.validation import ConfigError

from .constants import breakpoint_defaults
from .lengths import Length, parse_length


class _Unset:
    """Marker type for a slot with no value at its breakpoint."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET: Any = _Unset()


def is_unset(slot: Any) -> bool:
    """Check whether a slot holds the unset marker."""
    return slot is UNSET


class BreakpointMode(str, Enum):
    """Direction of a breakpoint width condition."""

    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class Breakpoint:
    """
    A single resolved breakpoint.

    Attributes:
        index: Position in the spec (0 is the base entry)
        width: Effective width (None for the base entry)
        mode: Condition direction

    Example:
        >>> Breakpoint(1, Length(768, "px")).condition
        '(min-width: 768px)'
    """

    index: int
    width: Length | None = None
    mode: BreakpointMode = BreakpointMode.MIN

    def __post_init__(self) -> None:
        if (self.index == 0) != (self.width is None):
            raise ConfigError("Only the base breakpoint (index 0) may omit its width")

    @property
    def is_base(self) -> bool:
        return self.width is None

    @property
    def condition(self) -> str | None:
        """Width condition text, or None for the base entry."""
        if self.width is None:
            return None
        return f"({self.mode.value}-width: {self.width})"


@dataclass(frozen=True)
class BreakpointSpec:
    """
    Ordered breakpoints with the base entry first.

    Build with from_widths() rather than directly so widths are validated.

    Attributes:
        breakpoints: Resolved breakpoints, base first
        mode: Mode shared by every conditional breakpoint
    """

    breakpoints: tuple[Breakpoint, ...]
    mode: BreakpointMode = BreakpointMode.MIN

    def __len__(self) -> int:
        return len(self.breakpoints)

    def __iter__(self):
        return iter(self.breakpoints)

    def __getitem__(self, index: int) -> Breakpoint:
        return self.breakpoints[index]

    @classmethod
    def from_widths(cls, widths: Sequence[Any], mode: BreakpointMode = BreakpointMode.MIN) -> "BreakpointSpec":
        """
        Build a spec from conditional widths (the base entry is implicit).

        Widths must share one unit and increase strictly. In max mode every
        width is reduced by one unit so it does not overlap an adjacent
        min-width range.

        Args:
            widths: Literal widths for indices 1..N-1
            mode: min or max

        Returns:
            Validated BreakpointSpec

        Raises:
            ConfigError: If a width is unparseable or not positive, units are mixed, or widths are not increasing
        """
        try:
            mode = BreakpointMode(mode)
        except ValueError:
            raise ConfigError(f"Unknown breakpoint mode: {mode!r}") from None

        lengths = [parse_length(width) for width in widths]

        # Effective widths stay positive, including after the max-mode reduction
        floor = 1 if mode is BreakpointMode.MAX else 0
        for length in lengths:
            if length.value <= floor:
                raise ConfigError(
                    f"Breakpoint width must be greater than {floor}{length.unit} in {mode.value} mode: {length}"
                )

        for previous, current in zip(lengths, lengths[1:]):
            if current.unit != previous.unit:
                raise ConfigError(f"Breakpoint widths mix units: {previous} and {current}")
            if current.value <= previous.value:
                raise ConfigError(f"Breakpoint widths must increase strictly: {previous} followed by {current}")

        breakpoints = [Breakpoint(0, None, mode)]
        for index, length in enumerate(lengths, start=1):
            effective = length.minus_one() if mode is BreakpointMode.MAX else length
            breakpoints.append(Breakpoint(index, effective, mode))

        return cls(tuple(breakpoints), mode)


DEFAULT_BREAKPOINTS = BreakpointSpec.from_widths(breakpoint_defaults.WIDTHS)
