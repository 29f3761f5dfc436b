"""
Style Mixins

Shorthand expanders producing StyleBlocks for the preprocessor.

Package Structure:
    - responsive.py: Multi-breakpoint property expansion
    - grid.py: Named-area grid layouts
    - background.py: Cover-fit background images
    - text.py: Text clipping and line clamping

Usage::

    from stylekit.mixins import expand, grid_areas, background_cover, text_clamp

    blocks = expand({"use-max": ["global", "700px"], "padding": ["8px", "4px"]})
    layout = grid_areas(["nav main"], columns="200px 1fr")
    hero = background_cover("img/hero.jpg")
    title = text_clamp(lines=2)
"""

from .background import background_cover
from .grid import GridTemplate, grid_areas
from .responsive import expand, resolve_breakpoints
from .text import text_clamp

__all__ = [
    "expand",
    "resolve_breakpoints",
    "grid_areas",
    "GridTemplate",
    "background_cover",
    "text_clamp",
]
