"""
CLI Argument Parser Module

This module scans the raw argument list of ransel against the fixed option
table. Tokens starting with ``--`` are long flags, tokens starting with
``-`` are short flags and everything else is the target directory.

Every option whose short alias equals a flag, or whose long name is a prefix
of it, is applied; matching does not stop at the first hit. Flags that match
nothing are ignored.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import replace
from enum import Enum

from ransel.cli.options import OPTION_TABLE, OptionDescriptor, ParsedArguments, apply_option
from ransel.shared.constants import CLIMessages, CLIOptions, SelectionDefaults
from ransel.shared.errors import ErrorCode, create_directory_error, create_usage_error

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Classification of a command line token."""

    POSITIONAL = "positional"
    SHORT = "short"
    LONG = "long"


def classify(argument: str) -> TokenKind:
    """Classify `argument` as a long flag, short flag or positional."""
    if argument.startswith(CLIOptions.LONG_PREFIX):
        return TokenKind.LONG
    if argument.startswith(CLIOptions.SHORT_PREFIX):
        return TokenKind.SHORT
    return TokenKind.POSITIONAL


def _digits_to_value(digits: str) -> int | None:
    if not digits:
        return None
    value = int(digits)
    if value > SelectionDefaults.MAX_OPTION_VALUE:
        return None
    return value


def leading_int(text: str) -> int | None:
    """Decode the run of decimal digits at the start of `text`.

    Returns None when `text` does not start with a digit or the value does
    not fit the option range.
    """
    end = 0
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return _digits_to_value(text[:end])


def trailing_int(text: str) -> int | None:
    """Decode the longest run of decimal digits at the end of `text`.

    ``--count=15`` and ``--count15`` both yield 15. Returns None when `text`
    does not end with a digit.
    """
    start = len(text)
    while start > 0 and "0" <= text[start - 1] <= "9":
        start -= 1
    return _digits_to_value(text[start:])


def _resolve_directory(argument: str) -> str:
    if not os.path.exists(argument):
        raise create_directory_error(
            ErrorCode.DIRECTORY_NOT_FOUND,
            CLIMessages.Error.DIRECTORY_NOT_EXISTS.format(path=argument),
            argument,
            operation="parse_arguments",
        )
    if not os.path.isdir(argument):
        raise create_directory_error(
            ErrorCode.INVALID_PATH,
            CLIMessages.Error.NOT_DIRECTORY.format(path=argument),
            argument,
            operation="parse_arguments",
        )
    return argument


def parse_arguments(
    argv: Sequence[str],
    options: tuple[OptionDescriptor, ...] = OPTION_TABLE,
) -> ParsedArguments:
    """Parse a raw argument list.

    Args:
        argv: Full argument list; ``argv[0]`` is the program name and is skipped
        options: Option table to match flags against

    Returns:
        ParsedArguments with the applied options and the target directory
        (empty if none was given). Parsing stops as soon as help is requested.

    Raises:
        ApplicationError: On a missing or undecodable option value
        InfrastructureError: If a positional argument is not an existing
            directory
    """
    state = ParsedArguments.from_table(options)

    i = 1
    while i < len(argv):
        argument = argv[i]
        kind = classify(argument)

        if kind is TokenKind.POSITIONAL:
            state = replace(state, directory=_resolve_directory(argument))
            i += 1
            continue

        for option in options:
            if not option.matches(argument):
                continue

            if not option.takes_value:
                value = option.default
            elif kind is TokenKind.SHORT:
                if i + 1 >= len(argv):
                    raise create_usage_error(
                        CLIMessages.Error.NO_VALUE.format(flag=argument),
                        argument=argument,
                    )
                following = argv[i + 1]
                decoded = leading_int(following)
                if decoded is None:
                    raise create_usage_error(
                        CLIMessages.Error.SHORT_DECODE_FAILED.format(
                            value=following,
                            flag=argument,
                        ),
                        argument=argument,
                    )
                value = decoded
                i += 1
            else:
                decoded = trailing_int(argument)
                if decoded is None:
                    raise create_usage_error(
                        CLIMessages.Error.LONG_DECODE_FAILED.format(flag=argument),
                        argument=argument,
                    )
                value = decoded

            logger.debug("Applying option %s with value %d", option.kind.value, value)
            state = apply_option(option.kind, value, state)
            if state.help_requested:
                return state

        i += 1

    return state
