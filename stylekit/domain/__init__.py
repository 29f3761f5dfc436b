"""
Domain Models - immutable structures shared by the mixins

This package contains:
    - lengths: Length, parse_length
    - breakpoints: UNSET, Breakpoint, BreakpointSpec, DEFAULT_BREAKPOINTS
    - blocks: StyleBlock
    - constants: breakpoint_defaults, grid_defaults

Usage:
    from stylekit.domain import UNSET, StyleBlock

    block = StyleBlock.of([("overflow", "hidden")])
"""

from .blocks import BASE, StyleBlock
from .breakpoints import DEFAULT_BREAKPOINTS, UNSET, Breakpoint, BreakpointMode, BreakpointSpec, is_unset
from .lengths import Length, parse_length

__all__ = [
    # Slots
    "UNSET",
    "is_unset",
    # Breakpoints
    "Breakpoint",
    "BreakpointMode",
    "BreakpointSpec",
    "DEFAULT_BREAKPOINTS",
    "Length",
    "parse_length",
    # Output
    "BASE",
    "StyleBlock",
]
