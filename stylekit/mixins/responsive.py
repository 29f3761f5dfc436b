"""
Responsive Breakpoint Expansion

Expands a table of per-breakpoint property values into one base block plus
one conditional block per breakpoint, skipping empty slots.

Example::

    from stylekit.mixins.responsive import expand
    from stylekit.domain import UNSET

    blocks = expand({
        "margin-bottom": ["12px", UNSET, UNSET, "16px"],
        "border-width": ["1px", "2px"],
    })
    # base:                 margin-bottom: 12px; border-width: 1px
    # (min-width: 480px):   border-width: 2px
    # (min-width: 1024px):  margin-bottom: 16px
"""

from collections.abc import Mapping
from typing import Any

from stylekit.core.logging_config import get_logger, log_with_context
from stylekit.domain.blocks import StyleBlock
from stylekit.domain.breakpoints import DEFAULT_BREAKPOINTS, BreakpointMode, BreakpointSpec, is_unset
from stylekit.domain.constants import breakpoint_defaults
from stylekit.utils.error_handling import log_and_raise
from stylekit.validation import ConfigError, InputValidator

logger = get_logger(__name__)

MODE_KEYS = {
    breakpoint_defaults.USE_MIN_KEY: BreakpointMode.MIN,
    breakpoint_defaults.USE_MAX_KEY: BreakpointMode.MAX,
}


def resolve_breakpoints(config: Mapping[str, Any]) -> BreakpointSpec:
    """
    Resolve the breakpoint spec in effect for a config.

    An override is read from "use-min" or "use-max". Its first entry is the
    base placeholder and is ignored whatever its value.

    Args:
        config: Expansion config

    Returns:
        The override spec, or DEFAULT_BREAKPOINTS

    Raises:
        ConfigError: If both mode keys are present or the override is invalid
    """
    present = [key for key in MODE_KEYS if key in config]
    if len(present) > 1:
        raise ConfigError(f"Only one of {', '.join(repr(k) for k in MODE_KEYS)} may be given")
    if not present:
        return DEFAULT_BREAKPOINTS

    key = present[0]
    widths = InputValidator.validate_sequence(config[key], key)
    if not widths:
        raise ConfigError(f"'{key}' needs at least the base placeholder entry")

    return BreakpointSpec.from_widths(widths[1:], MODE_KEYS[key])


def property_table(config: Mapping[str, Any], spec: BreakpointSpec) -> dict[str, tuple]:
    """
    Extract property slot sequences in declaration order.

    Raises:
        ConfigError: If a property name is not a string or has more slots than breakpoints
    """
    table = {}
    for name, value in config.items():
        if name in MODE_KEYS:
            continue
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Property names must be non-empty strings, got {name!r}")

        slots = InputValidator.validate_sequence(value, name)
        if len(slots) > len(spec):
            raise ConfigError(f"'{name}' has {len(slots)} values but only {len(spec)} breakpoints are defined")
        if any(slot is None for slot in slots):
            raise ConfigError(f"'{name}' contains None; use UNSET to skip a breakpoint")
        table[name] = slots
    return table


def expand(config: Mapping[str, Any]) -> tuple[StyleBlock, ...]:
    """
    Expand responsive property values into style blocks.

    Slot i of every property belongs to breakpoint i. Missing trailing slots
    and UNSET slots contribute nothing. Blocks without declarations are
    omitted, the base block included.

    Args:
        config: Ordered mapping of property name -> slot sequence, plus an
            optional "use-min"/"use-max" breakpoint override

    Returns:
        Blocks in ascending breakpoint order, declarations in config order

    Raises:
        ConfigError: If the config is invalid (nothing is returned)

    Example:
        >>> blocks = expand({"use-max": ["global", "700px", "1300px"], "margin-bottom": ["12px", "14px"]})
        >>> [(b.condition, b.as_dict()) for b in blocks]
        [(None, {'margin-bottom': '12px'}), ('(max-width: 699px)', {'margin-bottom': '14px'})]
    """
    try:
        InputValidator.validate_mapping(config)
        spec = resolve_breakpoints(config)
        table = property_table(config, spec)
    except ConfigError as e:
        keys = list(config) if isinstance(config, Mapping) else []
        log_and_raise(logger, e, context={"keys": keys}, error_type="Breakpoint expansion")

    blocks = []
    for breakpoint in spec:
        declarations = [
            (name, slots[breakpoint.index])
            for name, slots in table.items()
            if breakpoint.index < len(slots) and not is_unset(slots[breakpoint.index])
        ]
        if declarations:
            blocks.append(StyleBlock.of(declarations, breakpoint))

    log_with_context(
        logger,
        "debug",
        "Expanded responsive properties",
        mode=spec.mode.value,
        breakpoints=len(spec),
        properties=len(table),
        blocks=len(blocks),
    )
    return tuple(blocks)
