"""Utility modules for Pizarra.

Provides:
- logger: get_logger for logging
"""

from pizarra.utils.logger import get_logger

__all__ = [
    "get_logger",
]
