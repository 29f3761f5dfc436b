"""
Configuration Error and Input Validators

This module provides the single exception raised for invalid mixin input,
plus small validators shared by the mixins.
"""

from collections.abc import Mapping, Sequence
from typing import Any


class ConfigError(ValueError):
    """
    Raised when a mixin receives an invalid configuration.

    Covers conflicting breakpoint mode keys, over-length slot sequences,
    non-monotonic breakpoint widths and malformed shorthand input.
    """

    pass


class InputValidator:
    """
    Validates raw mixin arguments before any output is built.
    """

    @staticmethod
    def validate_mapping(config: Any, name: str = "config") -> Mapping:
        """
        Validate that a configuration is an associative structure.

        Args:
            config: Caller-supplied configuration
            name: Label used in the error message

        Returns:
            The configuration unchanged

        Raises:
            ConfigError: If config is not a mapping
        """
        if not isinstance(config, Mapping):
            raise ConfigError(f"{name} must be a mapping, got {type(config).__name__}")
        return config

    @staticmethod
    def validate_sequence(value: Any, name: str) -> tuple:
        """
        Normalize a slot sequence to a tuple.

        Strings and numbers count as a one-item sequence.

        Raises:
            ConfigError: If value is a mapping or set (no defined order), raw bytes, or not a sequence
        """
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return (value,)
        if isinstance(value, (Mapping, set, frozenset, bytes, bytearray)) or not isinstance(value, Sequence):
            raise ConfigError(f"'{name}' must be a sequence, got {type(value).__name__}")
        return tuple(value)

    @staticmethod
    def validate_positive_int(value: Any, name: str) -> int:
        """
        Validate a positive integer argument (bool is rejected).

        Raises:
            ConfigError: If value is not an integer >= 1
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"'{name}' must be an integer, got {type(value).__name__}")
        if value < 1:
            raise ConfigError(f"'{name}' must be at least 1, got {value}")
        return value
