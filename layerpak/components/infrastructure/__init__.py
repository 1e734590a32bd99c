"""
Infrastructure package.
"""

from .status_logger_comp import (
    COLOR_CONTRIBUTE,
    COLOR_NAME,
    COLOR_REUSE,
    NullStatusLogger,
    StatusLogger,
    StatusSink,
)

__all__ = [
    "COLOR_CONTRIBUTE",
    "COLOR_NAME",
    "COLOR_REUSE",
    "NullStatusLogger",
    "StatusLogger",
    "StatusSink",
]
