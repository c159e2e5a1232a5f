"""Option model for the ransel command line.

The recognized options form a fixed table of descriptors. Each descriptor
carries an OptionKind, and `apply_option` folds a matched option and its
decoded value into a new ParsedArguments value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ransel.shared.constants import CLIDefaults, CLIOptions


class OptionKind(str, Enum):
    """Kinds of recognized options."""

    HELP = "help"
    COPY = "copy"
    LIST = "list"
    COUNT = "count"


@dataclass(frozen=True)
class OptionDescriptor:
    """One row of the option table.

    Attributes:
        short_alias: Single-dash alias, matched exactly
        long_name: Double-dash name, matched as a prefix of the argument
        takes_value: Whether the option needs an integer value
        default: Value used when the option is absent
        kind: What applying the option does
    """

    short_alias: str
    long_name: str
    takes_value: bool
    default: int
    kind: OptionKind

    def matches(self, argument: str) -> bool:
        """Return True if `argument` selects this option."""
        return argument == self.short_alias or argument.startswith(self.long_name)


OPTION_TABLE: tuple[OptionDescriptor, ...] = (
    OptionDescriptor(CLIOptions.HELP_SHORT, CLIOptions.HELP, False, 0, OptionKind.HELP),
    OptionDescriptor(
        CLIOptions.COPY_SHORT,
        CLIOptions.COPY,
        False,
        CLIDefaults.DEFAULT_COPY,
        OptionKind.COPY,
    ),
    OptionDescriptor(
        CLIOptions.LIST_SHORT,
        CLIOptions.LIST,
        False,
        CLIDefaults.DEFAULT_LIST,
        OptionKind.LIST,
    ),
    OptionDescriptor(
        CLIOptions.COUNT_SHORT,
        CLIOptions.COUNT,
        True,
        CLIDefaults.DEFAULT_COUNT,
        OptionKind.COUNT,
    ),
)


@dataclass(frozen=True)
class ParsedArguments:
    """State accumulated while scanning the command line.

    Boolean options are kept as 0/1 integers.
    """

    copy_flag: int = CLIDefaults.DEFAULT_COPY
    list_flag: int = CLIDefaults.DEFAULT_LIST
    count: int = CLIDefaults.DEFAULT_COUNT
    help_requested: bool = False
    directory: str = ""

    @classmethod
    def from_table(cls, options: tuple[OptionDescriptor, ...] = OPTION_TABLE) -> ParsedArguments:
        """Build the initial state from the defaults in `options`."""
        defaults = {option.kind: option.default for option in options}
        return cls(
            copy_flag=defaults.get(OptionKind.COPY, CLIDefaults.DEFAULT_COPY),
            list_flag=defaults.get(OptionKind.LIST, CLIDefaults.DEFAULT_LIST),
            count=defaults.get(OptionKind.COUNT, CLIDefaults.DEFAULT_COUNT),
        )

    @property
    def copy_enabled(self) -> bool:
        return self.copy_flag != 0

    @property
    def list_enabled(self) -> bool:
        return self.list_flag != 0


def apply_option(kind: OptionKind, value: int, state: ParsedArguments) -> ParsedArguments:
    """Return the state that results from applying option `kind`.

    COPY and LIST always switch their option on; the supplied value is
    ignored, so ``--list=0`` leaves listing enabled.
    """
    if kind is OptionKind.HELP:
        return replace(state, help_requested=True)
    if kind is OptionKind.COPY:
        return replace(state, copy_flag=1)
    if kind is OptionKind.LIST:
        return replace(state, list_flag=1)
    if kind is OptionKind.COUNT:
        return replace(state, count=value)
    error_msg = f"Unknown option kind: {kind!r}"
    raise ValueError(error_msg)
