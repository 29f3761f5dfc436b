"""
Tests for stylekit.mixins.background module
"""

import pytest

from stylekit.mixins.background import background_cover, image_value
from stylekit.validation import ConfigError


class TestBackgroundCover:
    """Test cover-fit background declarations"""

    def test_declarations(self):
        """Test full declaration list and order"""
        block = background_cover("img/hero.jpg")
        assert block.is_base
        assert block.declarations == (
            ("background-image", 'url("img/hero.jpg")'),
            ("background-position", "center"),
            ("background-repeat", "no-repeat"),
            ("background-size", "cover"),
        )

    def test_custom_position(self):
        """Test position override"""
        block = background_cover("a.png", position="top left")
        assert block.as_dict()["background-position"] == "top left"

    def test_empty_image(self):
        """Test empty image is rejected"""
        with pytest.raises(ConfigError, match="non-empty string"):
            background_cover("  ")


class TestImageValue:
    """Test image wrapping"""

    @pytest.mark.parametrize(
        "image",
        [
            "url(a.png)",
            "URL('a.png')",
            "linear-gradient(red, blue)",
            "repeating-radial-gradient(circle, red, blue 10%)",
            'image-set("a.png" 1x, "a-2x.png" 2x)',
        ],
    )
    def test_functions_pass_through(self, image):
        """Test existing image functions are left alone"""
        assert image_value(image) == image

    def test_quotes_escaped(self):
        """Test double quotes in a bare path are escaped"""
        assert image_value('we"ird.png') == 'url("we\\"ird.png")'

    def test_non_string(self):
        """Test non-string images are rejected"""
        with pytest.raises(ConfigError):
            image_value(None)
