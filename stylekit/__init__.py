"""
stylekit - style-authoring mixins

Expands shorthand declarations into plain style blocks for a style-sheet
preprocessor to serialize.

Usage::

    from stylekit import UNSET, expand

    for block in expand({"margin-bottom": ["12px", UNSET, UNSET, "16px"]}):
        print(block.condition, block.as_dict())
"""

from .domain import DEFAULT_BREAKPOINTS, UNSET, Breakpoint, BreakpointMode, BreakpointSpec, StyleBlock
from .mixins import GridTemplate, background_cover, expand, grid_areas, text_clamp
from .validation import ConfigError

__version__ = "1.0.0"

__all__ = [
    "expand",
    "grid_areas",
    "background_cover",
    "text_clamp",
    "GridTemplate",
    "StyleBlock",
    "Breakpoint",
    "BreakpointMode",
    "BreakpointSpec",
    "DEFAULT_BREAKPOINTS",
    "UNSET",
    "ConfigError",
]
