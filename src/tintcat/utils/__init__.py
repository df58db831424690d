"""Utility modules for tintcat.

Provides:
- logger: get_logger for logging
"""

from tintcat.utils.logger import get_logger

__all__ = ["get_logger"]
