"""
Mixin Constants

Centralized, immutable defaults shared by the mixins.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BreakpointDefaults:
    """
    Default breakpoint configuration for responsive expansion.

    Attributes:
        WIDTHS: Mobile-first min-width thresholds applied after the base entry
        USE_MIN_KEY: Reserved config key selecting min-width override widths
        USE_MAX_KEY: Reserved config key selecting max-width override widths
        BASE_PLACEHOLDER: Conventional first entry of an override sequence

    Example:
        >>> breakpoint_defaults.WIDTHS
        ('480px', '768px', '1024px', '1280px')
    """

    WIDTHS: tuple[str, ...] = ("480px", "768px", "1024px", "1280px")
    """phablet, tablet, desktop, wide"""

    USE_MIN_KEY: str = "use-min"
    USE_MAX_KEY: str = "use-max"

    BASE_PLACEHOLDER: str = "global"


@dataclass(frozen=True)
class GridDefaults:
    """
    Grid template constants.

    Attributes:
        EMPTY_CELL: Character that marks an unnamed cell (any run of it counts)
    """

    EMPTY_CELL: str = "."


breakpoint_defaults = BreakpointDefaults()
grid_defaults = GridDefaults()
