"""
Text clipping and line clamping
"""

from stylekit.core.logging_config import get_logger
from stylekit.domain.blocks import StyleBlock
from stylekit.utils.error_handling import log_and_raise
from stylekit.validation import ConfigError, InputValidator

logger = get_logger(__name__)


def text_clamp(lines: int = 1) -> StyleBlock:
    """
    Clip overflowing text with an ellipsis.

    One line uses nowrap + text-overflow; more lines use the -webkit-box
    line clamp.

    Args:
        lines: Number of visible lines (default: 1)

    Returns:
        Base StyleBlock

    Raises:
        ConfigError: If lines is not a positive integer
    """
    try:
        lines = InputValidator.validate_positive_int(lines, "lines")
    except ConfigError as e:
        log_and_raise(logger, e, context={"lines": lines}, error_type="Text clamp")

    if lines == 1:
        return StyleBlock.of(
            [
                ("overflow", "hidden"),
                ("text-overflow", "ellipsis"),
                ("white-space", "nowrap"),
            ]
        )

    return StyleBlock.of(
        [
            ("display", "-webkit-box"),
            ("-webkit-box-orient", "vertical"),
            ("-webkit-line-clamp", lines),
            ("line-clamp", lines),
            ("overflow", "hidden"),
        ]
    )
