"""
Utility helpers shared across dialectkit packages.
"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
