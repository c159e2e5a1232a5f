"""
CLI-related Type Definitions

This module provides type aliases and the validated option model for the
selection run.

These types ensure CLI arguments are validated at the boundary,
preventing invalid data from propagating into the core logic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, DirectoryPath, conint

# File system types
ValidDirectoryPath = DirectoryPath

# CLI option types
PositiveInt = conint(gt=0)


class SelectionOptions(BaseModel):
    """Validated configuration of one selection run.

    Attributes:
        directory: Absolute path of an existing directory
        requested_count: Number of files to select, above zero
        copy_enabled: Copy the selected files into a new directory
        list_enabled: Print the selected paths to stdout
    """

    model_config = ConfigDict(frozen=True)

    directory: ValidDirectoryPath
    requested_count: PositiveInt  # type: ignore[valid-type]
    copy_enabled: bool = True
    list_enabled: bool = True
