"""
CLI Error Handling Utilities

This module maps exceptions raised during a ransel run to CLI errors,
logs them and writes the user-facing message to standard error.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.markup import escape

from ransel.shared.constants import CLIDefaults, CLIMessages
from ransel.shared.errors import (
    ApplicationError,
    CliError,
    ErrorCode,
    InfrastructureError,
    InternalError,
    RanselError,
    create_cli_error,
)

logger = logging.getLogger(__name__)


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    console: Console | None = None,
) -> int:
    """Handle a CLI error with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        console: Console used for the error message (stderr if None)

    Returns:
        Exit code for the process
    """
    error_context = _create_error_context(error, command)
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, cli_error, error_context)
    _output_error(cli_error, console)
    return cli_error.exit_code


def _create_error_context(error: BaseException, command: str) -> dict[str, Any]:
    return {
        "command": command,
        "error_type": type(error).__name__,
    }


def _map_error_to_cli_error(
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        if error.command is None:
            error.command = command
        return error

    # ransel errors keep their own message and code
    if isinstance(error, RanselError):
        error_context["error_code"] = error.code.value
        if isinstance(error, ApplicationError):
            error_context["error_category"] = "usage"
        elif isinstance(error, InfrastructureError):
            error_context["error_category"] = "file_system"
        elif isinstance(error, InternalError):
            error_context["error_category"] = "internal"
        return create_cli_error(
            message=error.message,
            command=command,
            code=error.code,
            original_error=error,
            exit_code=CLIDefaults.EXIT_ERROR,
        )

    if isinstance(error, KeyboardInterrupt):
        error_context["interrupt_type"] = "user_interrupt"
        return create_cli_error(
            message="Command interrupted by user",
            command=command,
            code=ErrorCode.CLI_COMMAND_INTERRUPTED,
            exit_code=CLIDefaults.EXIT_INTERRUPTED,
        )

    if isinstance(error, OSError):
        error_context["error_category"] = "file_system"
        return create_cli_error(
            message=f"File system error: {error}",
            command=command,
            original_error=error,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"Unexpected error: {error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
    )


def _log_error(
    error: BaseException,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    if isinstance(error, KeyboardInterrupt):
        logger.warning(
            "Command interrupted: %s",
            cli_error.message,
            extra={"context": error_context},
        )
    elif isinstance(error, RanselError):
        logger.debug(
            "CLI error in %s: %s",
            cli_error.command,
            cli_error.message,
            extra={"context": error_context, "error": error.to_dict()},
        )
    else:
        logger.error(
            "CLI error in %s: %s",
            cli_error.command,
            cli_error.message,
            exc_info=error,
            extra={"context": error_context},
        )


def _output_error(cli_error: CliError, console: Console | None) -> None:
    console = console or Console(stderr=True)
    console.print(
        f"[red]{escape(CLIMessages.Error.PREFIX + cli_error.message)}[/red]",
        soft_wrap=True,
        highlight=False,
    )
