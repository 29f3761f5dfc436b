"""
Tests for breakpoint domain models

Tests UNSET, Breakpoint, BreakpointSpec and DEFAULT_BREAKPOINTS.
"""

import copy
import dataclasses
import pickle

import pytest

from stylekit.domain.breakpoints import (
    DEFAULT_BREAKPOINTS,
    UNSET,
    Breakpoint,
    BreakpointMode,
    BreakpointSpec,
    is_unset,
)
from stylekit.domain.constants import breakpoint_defaults
from stylekit.domain.lengths import Length
from stylekit.validation import ConfigError


class TestUnset:
    """Tests for the UNSET slot marker"""

    def test_is_unset(self):
        """Test only the marker itself counts as unset"""
        assert is_unset(UNSET)
        assert not is_unset(None)
        assert not is_unset("_")
        assert not is_unset(0)

    def test_singleton_survives_copy_and_pickle(self):
        """Test copies of the marker are the same object"""
        assert copy.deepcopy(UNSET) is UNSET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_repr(self):
        """Test readable repr"""
        assert repr(UNSET) == "UNSET"


class TestBreakpoint:
    """Tests for Breakpoint"""

    def test_base_has_no_condition(self):
        """Test index 0 without width is the base entry"""
        base = Breakpoint(0)
        assert base.is_base
        assert base.condition is None

    def test_min_condition(self):
        """Test min-width condition text"""
        assert Breakpoint(1, Length(768)).condition == "(min-width: 768px)"

    def test_max_condition(self):
        """Test max-width condition text"""
        assert Breakpoint(2, Length(47.5, "em"), BreakpointMode.MAX).condition == "(max-width: 47.5em)"

    def test_base_with_width_rejected(self):
        """Test index 0 cannot carry a width"""
        with pytest.raises(ConfigError):
            Breakpoint(0, Length(100))

    def test_conditional_without_width_rejected(self):
        """Test index > 0 needs a width"""
        with pytest.raises(ConfigError):
            Breakpoint(3)

    def test_frozen(self):
        """Test breakpoints are immutable"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Breakpoint(0).index = 1  # type: ignore[misc]


class TestBreakpointSpec:
    """Tests for BreakpointSpec.from_widths"""

    def test_base_first(self):
        """Test the base entry is implicit and first"""
        spec = BreakpointSpec.from_widths(["600px"])
        assert len(spec) == 2
        assert spec[0].is_base
        assert spec[1].width == Length(600, "px")

    def test_max_subtracts_one(self):
        """Test max mode stores width minus one unit"""
        spec = BreakpointSpec.from_widths(["700px", "1300px"], BreakpointMode.MAX)
        assert [str(bp.width) for bp in spec if not bp.is_base] == ["699px", "1299px"]

    def test_mode_from_string(self):
        """Test mode accepts its string value"""
        assert BreakpointSpec.from_widths([], "max").mode is BreakpointMode.MAX

    def test_unknown_mode(self):
        """Test an unknown mode is a ConfigError"""
        with pytest.raises(ConfigError, match="Unknown breakpoint mode"):
            BreakpointSpec.from_widths(["1px"], "between")

    @pytest.mark.parametrize("width", ["0px", "-10px", 0])
    def test_non_positive_min_width(self, width):
        """Test min-mode widths must be above zero"""
        with pytest.raises(ConfigError, match="greater than 0px in min mode"):
            BreakpointSpec.from_widths([width])

    @pytest.mark.parametrize("width", ["1px", "0.5px", "-3px"])
    def test_max_width_at_most_one_unit(self, width):
        """Test max-mode widths must stay positive after the one-unit reduction"""
        with pytest.raises(ConfigError, match="greater than 1px in max mode"):
            BreakpointSpec.from_widths([width], BreakpointMode.MAX)

    def test_fractional_max_width_above_one(self):
        """Test 1.5em in max mode resolves to 0.5em"""
        spec = BreakpointSpec.from_widths(["1.5em"], BreakpointMode.MAX)
        assert spec[1].condition == "(max-width: 0.5em)"

    def test_not_increasing(self):
        """Test widths must increase strictly"""
        with pytest.raises(ConfigError, match="increase strictly"):
            BreakpointSpec.from_widths(["800px", "700px"])

    def test_monotonic_check_uses_literal_widths(self):
        """Test adjacent widths one unit apart are valid in max mode"""
        spec = BreakpointSpec.from_widths(["700px", "701px"], BreakpointMode.MAX)
        assert [str(bp.width) for bp in spec][1:] == ["699px", "700px"]

    def test_indexes(self):
        """Test breakpoint indexes follow position"""
        spec = BreakpointSpec.from_widths(["1px", "2px", "3px"])
        assert [bp.index for bp in spec] == [0, 1, 2, 3]


class TestDefaultBreakpoints:
    """Tests for the process-wide default spec"""

    def test_base_plus_four_min(self):
        """Test default is base then four min breakpoints"""
        assert len(DEFAULT_BREAKPOINTS) == 5
        assert DEFAULT_BREAKPOINTS.mode is BreakpointMode.MIN
        assert [bp.condition for bp in DEFAULT_BREAKPOINTS] == [
            None,
            "(min-width: 480px)",
            "(min-width: 768px)",
            "(min-width: 1024px)",
            "(min-width: 1280px)",
        ]

    def test_matches_constants(self):
        """Test default spec is built from breakpoint_defaults"""
        assert tuple(str(bp.width) for bp in DEFAULT_BREAKPOINTS[1:]) == breakpoint_defaults.WIDTHS

    def test_immutable(self):
        """Test default spec cannot be modified in place"""
        assert isinstance(DEFAULT_BREAKPOINTS.breakpoints, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_BREAKPOINTS.mode = BreakpointMode.MAX  # type: ignore[misc]
