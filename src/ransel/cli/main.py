"""
ransel CLI Main Module

Entry point of the ransel command. It parses the command line, validates the
run options, and hands the selection to the directory selector.

Every error raised below this module is converted into an exit code here;
the rest of the package never terminates the process itself.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from ransel.cli.common.error_handler import handle_cli_error
from ransel.cli.options import ParsedArguments
from ransel.cli.parser import parse_arguments
from ransel.core.random_source import RandomRange
from ransel.core.selector import select_files
from ransel.shared.constants import CLIDefaults, CLIHelp, CLIMessages
from ransel.shared.errors import ErrorCode, create_usage_error
from ransel.shared.types import SelectionOptions
from ransel.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_selection_options(parsed: ParsedArguments) -> SelectionOptions:
    """Validate parsed arguments into the options of a selection run.

    Raises:
        ApplicationError: If no directory was given, the count is zero, or
            the options fail validation
    """
    if not parsed.directory:
        raise create_usage_error(
            CLIMessages.Error.NO_DIRECTORY,
            code=ErrorCode.CLI_DIRECTORY_VALIDATION_FAILED,
            operation="validate_options",
        )

    if parsed.count == 0:
        raise create_usage_error(
            CLIMessages.Error.COUNT_NOT_POSITIVE,
            argument=str(parsed.count),
            operation="validate_options",
        )

    try:
        return SelectionOptions(
            directory=Path(parsed.directory).absolute(),
            requested_count=parsed.count,
            copy_enabled=parsed.copy_enabled,
            list_enabled=parsed.list_enabled,
        )
    except ValidationError as e:
        raise create_usage_error(
            CLIMessages.Error.INVALID_OPTIONS.format(error=e),
            code=ErrorCode.VALIDATION_ERROR,
            operation="validate_options",
            original_error=e,
        ) from e


def run(
    argv: Sequence[str],
    *,
    rng: RandomRange | None = None,
    cwd: str | Path | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one ransel invocation and return its exit code.

    Args:
        argv: Full argument list including the program name
        rng: Generator for the run (seeded from system entropy if None)
        cwd: Parent directory for the copy destination (current directory if None)
        stdout: Stream for data output (``sys.stdout`` if None)

    Raises:
        RanselError: On any usage, file system or internal error
    """
    out = stdout if stdout is not None else sys.stdout

    parsed = parse_arguments(argv)
    if parsed.help_requested:
        out.write(CLIHelp.HELP_TEXT + "\n")
        return CLIDefaults.EXIT_SUCCESS

    options = build_selection_options(parsed)
    logger.debug(
        "Selecting up to %d files from %s (copy=%s, list=%s)",
        options.requested_count,
        options.directory,
        options.copy_enabled,
        options.list_enabled,
    )

    select_files(
        options.directory,
        options.requested_count,
        copy_enabled=options.copy_enabled,
        list_enabled=options.list_enabled,
        rng=rng if rng is not None else RandomRange(),
        cwd=cwd,
        stdout=out,
    )
    return CLIDefaults.EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the ransel command.

    Args:
        argv: Full argument list including the program name (``sys.argv`` if None)

    Returns:
        Process exit code
    """
    args = list(sys.argv if argv is None else argv)

    if len(args) <= 1:
        sys.stdout.write(CLIMessages.Info.HINT + "\n")
        return CLIDefaults.EXIT_SUCCESS

    setup_logging()

    try:
        return run(args)
    except (Exception, KeyboardInterrupt) as e:  # pylint: disable=broad-exception-caught
        return handle_cli_error(e, CLIMessages.CommandNames.SELECT)


if __name__ == "__main__":
    sys.exit(main())
