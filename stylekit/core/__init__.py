"""
Core infrastructure shared across stylekit (logging).
"""

from .logging_config import get_logger, log_with_context, setup_logging

__all__ = ["get_logger", "log_with_context", "setup_logging"]
