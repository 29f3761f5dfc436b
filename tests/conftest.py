"""
Pytest configuration and shared fixtures

Provides sample mixin configs and logging helpers shared across test modules.
"""

import logging
from unittest.mock import MagicMock

import pytest

from stylekit.domain import UNSET
from stylekit.settings import reset_settings

# ===== Mixin Config Fixtures =====


@pytest.fixture
def sparse_config():
    """Properties with skipped and missing trailing slots (default breakpoints)"""
    return {
        "margin-bottom": ["12px", UNSET, UNSET, "16px"],
        "border-width": ["1px", "2px"],
    }


@pytest.fixture
def max_mode_config():
    """Config overriding breakpoints in max-width mode"""
    return {
        "use-max": ["global", "700px", "1300px"],
        "margin-bottom": ["12px", "14px"],
    }


@pytest.fixture
def ordered_config():
    """Three properties declared A, B, C with values at every breakpoint"""
    return {
        "color": ["red", "green", "blue"],
        "background": ["white", "black", "grey"],
        "padding": ["4px", "8px", "12px"],
    }


@pytest.fixture
def holy_grail_rows():
    """Classic header / sidebar / main / footer area map"""
    return ["header header", "sidebar main", "footer footer"]


# ===== Logging Fixtures =====


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing log calls."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def clean_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


# ===== Settings Fixtures =====


@pytest.fixture
def clean_env(monkeypatch):
    """Clear stylekit variables and cached settings"""
    for name in ("STYLEKIT_LOG_LEVEL", "STYLEKIT_LOG_JSON", "STYLEKIT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield monkeypatch
    reset_settings()
