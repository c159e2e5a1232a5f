"""ransel Error Handling Module

This module defines the error handling system for ransel, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved

Nothing below the CLI driver terminates the process. Errors are raised
and the driver turns them into exit codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for the ransel application."""

    # Usage Errors
    CLI_INVALID_ARGUMENTS = "CLI_INVALID_ARGUMENTS"
    CLI_DIRECTORY_VALIDATION_FAILED = "CLI_DIRECTORY_VALIDATION_FAILED"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # File System Errors
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    INVALID_PATH = "INVALID_PATH"
    DIRECTORY_EMPTY = "DIRECTORY_EMPTY"
    DIRECTORY_READ_FAILED = "DIRECTORY_READ_FAILED"
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"
    FILE_COPY_FAILED = "FILE_COPY_FAILED"

    # Internal Errors
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"

    # CLI Entrypoint Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"
    CLI_COMMAND_INTERRUPTED = "CLI_COMMAND_INTERRUPTED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are kept in additional_data;
    Path and Enum values are coerced on construction.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict with a guaranteed additional_data key."""
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = self.additional_data or {}
        return data


class RanselError(Exception):
    """Base exception class for all ransel errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize RanselError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ApplicationError(RanselError):
    """Application-level errors.

    Raised for invalid command line usage: missing directory, zero count,
    missing or undecodable flag values.
    """


class InfrastructureError(RanselError):
    """File system errors.

    Examples:
    - Target path does not exist or is not a directory
    - Target directory holds no regular files
    - Destination directory creation failure
    - File copy failure
    """


class InternalError(RanselError):
    """Internal invariant violations.

    Not expected under correct operation; carries the offending values
    in its context.
    """


class CliError(ApplicationError):
    """CLI-specific error with an associated process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_usage_error(
    message: str,
    argument: str | None = None,
    code: ErrorCode = ErrorCode.CLI_INVALID_ARGUMENTS,
    operation: str = "parse_arguments",
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a command line usage error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"argument": argument} if argument is not None else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(code, message, context, original_error)


def create_directory_error(
    code: ErrorCode,
    message: str,
    path: str | Path,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> InfrastructureError:
    """Create a directory-related file system error with context."""
    context = ErrorContext(
        file_path=str(path),
        operation=operation,
    )
    return InfrastructureError(code, message, context, original_error)


def create_copy_error(
    source: str | Path,
    destination: str | Path,
    original_error: Exception | None = None,
) -> InfrastructureError:
    """Create a file copy error with context."""
    context = ErrorContext(
        file_path=str(source),
        operation="copy_file",
        additional_data={"destination": Path(destination)},
    )
    return InfrastructureError(
        ErrorCode.FILE_COPY_FAILED,
        f"Failed to copy {source} to {destination}",
        context,
        original_error,
    )


def create_index_error(index: int, size: int) -> InternalError:
    """Create an out-of-bounds selection index error."""
    context = ErrorContext(
        operation="select_files",
        additional_data={"index": index, "inventory_size": size},
    )
    return InternalError(
        ErrorCode.INDEX_OUT_OF_BOUNDS,
        f"Index {index} is out of bounds [0, {size - 1}]",
        context,
    )


def create_cli_error(
    message: str,
    command: str | None = None,
    code: ErrorCode = ErrorCode.CLI_UNEXPECTED_ERROR,
    original_error: Exception | None = None,
    exit_code: int = 1,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    context = ErrorContext(
        operation="cli",
        additional_data=additional_data,
    )
    return CliError(
        code,
        message,
        context,
        original_error,
        command,
        exit_code,
    )
