"""
ransel Type Definitions

Boundary validation types used by the CLI layer.
"""

from .cli import (
    PositiveInt,
    SelectionOptions,
    ValidDirectoryPath,
)

__all__ = [
    "PositiveInt",
    "SelectionOptions",
    "ValidDirectoryPath",
]
