"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user-facing messages.
"""

from typing import Final


class CLIDefaults:
    """CLI default values."""

    # Exit codes
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130

    # Default option values (boolean options are stored as 0/1)
    DEFAULT_COPY = 1
    DEFAULT_LIST = 1
    DEFAULT_COUNT = 10


class CLIOptions:
    """Short aliases and long names of the recognized options."""

    HELP_SHORT = "-h"
    HELP = "--help"
    COPY_SHORT = "-c"
    COPY = "--copy"
    LIST_SHORT = "-l"
    LIST = "--list"
    COUNT_SHORT = "-C"
    COUNT = "--count"

    LONG_PREFIX = "--"
    SHORT_PREFIX = "-"


class SelectionDefaults:
    """Selection and destination naming constants."""

    # Length of the random destination directory name
    DESTINATION_NAME_LENGTH = 31
    NAME_ALPHABET_FIRST = "a"
    NAME_ALPHABET_LAST = "z"

    # Largest value a numeric option accepts
    MAX_OPTION_VALUE: Final[int] = 2**32 - 1


class CLIMessages:
    """CLI message templates."""

    class Error:
        """Error message templates."""

        NO_DIRECTORY = "No directory specified"
        COUNT_NOT_POSITIVE = "Requested count is expected to be above zero"
        NOT_DIRECTORY = "{path} is not a directory"
        DIRECTORY_NOT_EXISTS = "directory {path} does not exist"
        NO_VALUE = "No value provided for flag {flag}"
        SHORT_DECODE_FAILED = "Failed to decode value of {value} for flag {flag}"
        LONG_DECODE_FAILED = "Failed to decode value for {flag}"
        DIRECTORY_EMPTY = "Directory is empty"
        DIRECTORY_READ_FAILED = "Failed to read directory {path}"
        CREATE_DIRECTORY_FAILED = "Failed to create directory {path}"
        INVALID_OPTIONS = "Invalid options: {error}"
        PREFIX = "Error: "

    class Info:
        """Info message templates."""

        HINT = "Run this program with '--help' argument to get help"
        STARTING = "Starting to process indices..."
        INDEX = "Index {index}"
        ITER_PATH = "Iter path {path}"

    class CommandNames:
        """Command names used in error messages and logging."""

        SELECT = "select"


class CLIHelp:
    """Help text."""

    HELP_TEXT = """Usage: ransel [OPTIONS] DIRECTORY
Select random files from DIRECTORY.
Example: ransel --count=15 example

Options:
  -h  --help  Display this message and quit
  -l  --list  List all selected files to stdout
              Enabled by default
  -c  --copy  Copy selected files to the directory
              Directory name is 31-characters long random character sequence
              Enabled by default
  -C  --count Count of files to select
              Set to 10 by default"""


__all__ = [
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "SelectionDefaults",
]
