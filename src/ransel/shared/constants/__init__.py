"""
ransel Constants Module

Centralized constants for the ransel application: defaults, option names,
message templates and help text.
"""

from .cli import (
    CLIDefaults,
    CLIHelp,
    CLIMessages,
    CLIOptions,
    SelectionDefaults,
)

__all__ = [
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "SelectionDefaults",
]
