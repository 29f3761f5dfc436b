"""
Cover-fit background images
"""

import re

from stylekit.core.logging_config import get_logger
from stylekit.domain.blocks import StyleBlock
from stylekit.utils.error_handling import log_and_raise
from stylekit.validation import ConfigError

logger = get_logger(__name__)

# url(...) and the CSS image functions pass through untouched
_IMAGE_FUNCTION = re.compile(r"^(url|image-set|(repeating-)?(linear|radial|conic)-gradient)\(.*\)$", re.IGNORECASE)


def image_value(image: str) -> str:
    """
    Wrap a bare image path in url("...").

    Raises:
        ConfigError: If image is empty or not a string
    """
    if not isinstance(image, str) or not image.strip():
        raise ConfigError(f"Background image must be a non-empty string, got {image!r}")

    image = image.strip()
    if _IMAGE_FUNCTION.match(image):
        return image
    return 'url("{}")'.format(image.replace('"', '\\"'))


def background_cover(image: str, position: str = "center") -> StyleBlock:
    """
    Background image that covers its box without tiling.

    Args:
        image: Image path, url(...) or gradient
        position: background-position value (default: center)

    Returns:
        Base StyleBlock with background-image, -position, -repeat and -size
    """
    try:
        value = image_value(image)
    except ConfigError as e:
        log_and_raise(logger, e, context={"image": image}, error_type="Background expansion")

    return StyleBlock.of(
        [
            ("background-image", value),
            ("background-position", position),
            ("background-repeat", "no-repeat"),
            ("background-size", "cover"),
        ]
    )
