"""
Style block output model

A StyleBlock is an ordered list of property/value declarations, optionally
guarded by a breakpoint width condition. Every mixin returns StyleBlocks so
the preprocessor consumes a single output type.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .breakpoints import Breakpoint

BASE = Breakpoint(0)


@dataclass(frozen=True)
class StyleBlock:
    """
    Ordered declarations for one breakpoint.

    Attributes:
        declarations: (property, value) pairs in caller declaration order
        breakpoint: Breakpoint guarding the block (BASE for unconditional)

    Example:
        block = StyleBlock((("margin-bottom", "12px"),))
        assert block.is_base
        assert block.as_dict() == {"margin-bottom": "12px"}
    """

    declarations: tuple[tuple[str, Any], ...] = ()
    breakpoint: Breakpoint = field(default=BASE)

    @classmethod
    def of(cls, declarations: Iterable[tuple[str, Any]], breakpoint: Breakpoint = BASE) -> "StyleBlock":
        return cls(tuple((prop, value) for prop, value in declarations), breakpoint)

    @property
    def is_base(self) -> bool:
        return self.breakpoint.is_base

    @property
    def condition(self) -> str | None:
        return self.breakpoint.condition

    @property
    def properties(self) -> tuple[str, ...]:
        return tuple(prop for prop, _ in self.declarations)

    def as_dict(self) -> dict[str, Any]:
        """Declarations as an insertion-ordered dict."""
        return dict(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)
