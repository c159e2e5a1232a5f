"""Directory selector for ransel.

This module picks files at random from a single directory and, depending on
the run options, copies them into a freshly created directory and/or lists
their paths on stdout.

The selection policy draws indices independently, so the same file may be
selected more than once; a file drawn again is listed again but copied only
once. When the inventory holds more than one file, the indices are drawn
from [1, selection_count - 1].
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from ransel.core.random_source import RandomRange
from ransel.shared.constants import CLIMessages
from ransel.shared.errors import (
    ErrorCode,
    create_copy_error,
    create_directory_error,
    create_index_error,
)

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Outcome of a selection run.

    Attributes:
        indices: Selection indices in processing order
        selected: Paths of the selected files, one per index
        destination: Directory the files were copied into, if copying
    """

    indices: list[int] = field(default_factory=list)
    selected: list[Path] = field(default_factory=list)
    destination: Path | None = None


def collect_inventory(directory: str | Path) -> list[os.DirEntry]:
    """Enumerate the regular files directly inside `directory`.

    The directory is read in a single pass; the returned order is the
    order the file system produced.

    Raises:
        InfrastructureError: If the directory cannot be read
    """
    try:
        with os.scandir(directory) as entries:
            return [entry for entry in entries if entry.is_file()]
    except OSError as e:
        raise create_directory_error(
            ErrorCode.DIRECTORY_READ_FAILED,
            CLIMessages.Error.DIRECTORY_READ_FAILED.format(path=directory),
            directory,
            operation="collect_inventory",
            original_error=e,
        ) from e


def selection_count(file_count: int, requested_count: int) -> int:
    """Number of files actually processed in a run."""
    return min(file_count, requested_count)


def draw_indices(file_count: int, requested_count: int, rng: RandomRange) -> list[int]:
    """Draw the selection indices for an inventory of `file_count` files.

    A single-file inventory, or a run selecting only one file, always yields
    ``[0]``. Otherwise every index is drawn from ``[1, count - 1]`` where
    ``count`` is the selection count. Indices may repeat.
    """
    count = selection_count(file_count, requested_count)
    if file_count == 1 or count == 1:
        return [0]
    return [rng.urand(1, count - 1) for _ in range(count)]


def destination_path(rng: RandomRange, cwd: str | Path | None = None) -> Path:
    """Build the path of a new randomly named directory under `cwd`."""
    base = str(cwd) if cwd is not None else os.getcwd()
    return Path(base + os.sep + rng.random_name() + os.sep)


def create_destination(destination: Path) -> None:
    """Create the destination directory.

    Raises:
        InfrastructureError: If the directory cannot be created, including
            when it already exists
    """
    try:
        os.mkdir(destination)
    except OSError as e:
        raise create_directory_error(
            ErrorCode.DIRECTORY_CREATION_FAILED,
            CLIMessages.Error.CREATE_DIRECTORY_FAILED.format(path=destination),
            destination,
            operation="create_destination",
            original_error=e,
        ) from e
    logger.debug("Created destination directory %s", destination)


def copy_into(source: str | Path, destination: Path) -> None:
    """Copy `source` into `destination`, keeping its base name.

    Raises:
        InfrastructureError: If the copy fails
    """
    try:
        shutil.copy2(source, destination)
    except OSError as e:
        raise create_copy_error(source, destination, original_error=e) from e


def select_files(  # pylint: disable=too-many-arguments
    directory: str | Path,
    requested_count: int,
    *,
    copy_enabled: bool,
    list_enabled: bool,
    rng: RandomRange,
    cwd: str | Path | None = None,
    stdout: TextIO | None = None,
) -> SelectionResult:
    """Select up to `requested_count` random files from `directory`.

    Args:
        directory: Directory to select from
        requested_count: Maximum number of files to select
        copy_enabled: Copy the selected files into a new random directory
        list_enabled: Write each selected path to `stdout`
        rng: Generator used for the index draw and the destination name
        cwd: Parent of the destination directory (current directory if None)
        stdout: Stream for the listing (``sys.stdout`` if None)

    Returns:
        SelectionResult describing what was selected

    Raises:
        InfrastructureError: On empty directory or any file system failure
        InternalError: If a selection index falls outside the inventory
    """
    out = stdout if stdout is not None else sys.stdout

    inventory = collect_inventory(directory)
    file_count = len(inventory)
    if file_count == 0:
        raise create_directory_error(
            ErrorCode.DIRECTORY_EMPTY,
            CLIMessages.Error.DIRECTORY_EMPTY,
            directory,
            operation="select_files",
        )

    result = SelectionResult(indices=draw_indices(file_count, requested_count, rng))

    if copy_enabled:
        result.destination = destination_path(rng, cwd)
        create_destination(result.destination)

    copied: set[int] = set()
    logger.info(CLIMessages.Info.STARTING)
    for index in result.indices:
        if index >= file_count:
            raise create_index_error(index, file_count)

        entry = inventory[index]
        logger.info(CLIMessages.Info.INDEX.format(index=index))
        logger.info(CLIMessages.Info.ITER_PATH.format(path=entry.path))

        if result.destination is not None and index not in copied:
            copy_into(entry.path, result.destination)
            copied.add(index)
        if list_enabled:
            out.write(f"{entry.path}\n")
        result.selected.append(Path(entry.path))

    out.write("\n")
    out.flush()
    return result
