"""
Tests for ransel error handling system.

This module contains unit tests for the error hierarchy defined in
ransel.shared.errors.
"""

from enum import Enum
from pathlib import Path

import pytest

from ransel.shared.errors import (
    ApplicationError,
    CliError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    InternalError,
    RanselError,
    create_cli_error,
    create_copy_error,
    create_directory_error,
    create_index_error,
    create_usage_error,
)


class Color(Enum):
    RED = "red"


class TestErrorContext:
    """Test cases for ErrorContext frozen dataclass."""

    def test_empty_context(self):
        context = ErrorContext()

        assert context.file_path is None
        assert context.operation is None
        assert context.additional_data is None
        assert context.safe_dict() == {"additional_data": {}}

    def test_coerces_path_and_enum(self):
        context = ErrorContext(
            additional_data={
                "path": Path("/tmp/x"),
                "color": Color.RED,
                "code": ErrorCode.DIRECTORY_EMPTY,
                "count": 3,
            }
        )

        assert context.additional_data == {
            "path": str(Path("/tmp/x")),
            "color": "red",
            "code": "DIRECTORY_EMPTY",
            "count": 3,
        }

    def test_rejects_unconvertible_values(self):
        with pytest.raises(TypeError, match="Cannot coerce list"):
            ErrorContext(additional_data={"items": [1, 2]})

    def test_rejects_non_dict(self):
        with pytest.raises(TypeError, match="additional_data must be dict"):
            ErrorContext(additional_data=["not", "a", "dict"])

    def test_is_frozen(self):
        context = ErrorContext(operation="scan")

        with pytest.raises(AttributeError):
            context.operation = "other"


class TestRanselError:
    """Test cases for the error hierarchy."""

    def test_string_form(self):
        error = RanselError(ErrorCode.DIRECTORY_EMPTY, "Directory is empty")

        assert str(error) == "DIRECTORY_EMPTY: Directory is empty"

    def test_to_dict(self):
        original = OSError("denied")
        error = InfrastructureError(
            ErrorCode.DIRECTORY_READ_FAILED,
            "Failed to read directory /x",
            ErrorContext(file_path="/x", operation="collect_inventory"),
            original,
        )

        assert error.to_dict() == {
            "code": "DIRECTORY_READ_FAILED",
            "message": "Failed to read directory /x",
            "context": {
                "file_path": "/x",
                "operation": "collect_inventory",
                "additional_data": {},
            },
            "original_error": "denied",
        }

    def test_hierarchy(self):
        assert issubclass(ApplicationError, RanselError)
        assert issubclass(InfrastructureError, RanselError)
        assert issubclass(InternalError, RanselError)
        assert issubclass(CliError, ApplicationError)


class TestFactories:
    """Test cases for error factory helpers."""

    def test_usage_error(self):
        error = create_usage_error("No value provided for flag -C", argument="-C")

        assert isinstance(error, ApplicationError)
        assert error.code == ErrorCode.CLI_INVALID_ARGUMENTS
        assert error.context.operation == "parse_arguments"
        assert error.context.additional_data == {"argument": "-C"}

    def test_directory_error(self):
        error = create_directory_error(
            ErrorCode.DIRECTORY_CREATION_FAILED,
            "Failed to create directory /w/abc",
            Path("/w/abc"),
            operation="create_destination",
        )

        assert isinstance(error, InfrastructureError)
        assert error.context.file_path == str(Path("/w/abc"))

    def test_copy_error(self):
        original = OSError("disk full")

        error = create_copy_error("/src/a.txt", Path("/dst"), original_error=original)

        assert error.code == ErrorCode.FILE_COPY_FAILED
        assert error.message == f"Failed to copy /src/a.txt to {Path('/dst')}"
        assert error.context.additional_data == {"destination": str(Path("/dst"))}
        assert error.original_error is original

    def test_index_error(self):
        error = create_index_error(7, 3)

        assert isinstance(error, InternalError)
        assert error.message == "Index 7 is out of bounds [0, 2]"
        assert error.context.additional_data == {"index": 7, "inventory_size": 3}

    def test_cli_error(self):
        error = create_cli_error("boom", command="select", exit_code=2)

        assert error.code == ErrorCode.CLI_UNEXPECTED_ERROR
        assert error.command == "select"
        assert error.exit_code == 2
