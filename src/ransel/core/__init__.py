"""
Core components for ransel.

The random range generator and the directory selector.
"""

from .random_source import RandomRange
from .selector import SelectionResult, select_files

__all__ = [
    "RandomRange",
    "SelectionResult",
    "select_files",
]
