"""Tests for the option table and the option reducer."""

import pytest

from ransel.cli.options import (
    OPTION_TABLE,
    OptionDescriptor,
    OptionKind,
    ParsedArguments,
    apply_option,
)


class TestOptionTable:
    """Test the fixed option table."""

    def test_table_layout(self):
        rows = [
            (option.short_alias, option.long_name, option.takes_value, option.default, option.kind)
            for option in OPTION_TABLE
        ]

        assert rows == [
            ("-h", "--help", False, 0, OptionKind.HELP),
            ("-c", "--copy", False, 1, OptionKind.COPY),
            ("-l", "--list", False, 1, OptionKind.LIST),
            ("-C", "--count", True, 10, OptionKind.COUNT),
        ]

    @pytest.mark.parametrize("argument", ["-C", "--count", "--count=3", "--countX"])
    def test_count_matches(self, argument):
        assert OPTION_TABLE[3].matches(argument)

    @pytest.mark.parametrize("argument", ["-c", "--coun", "-C5", "count"])
    def test_count_does_not_match(self, argument):
        assert not OPTION_TABLE[3].matches(argument)


class TestParsedArguments:
    """Test the initial reducer state."""

    def test_from_table_uses_defaults(self):
        state = ParsedArguments.from_table()

        assert state == ParsedArguments(copy_flag=1, list_flag=1, count=10)

    def test_from_custom_table(self):
        options = (
            OptionDescriptor("-c", "--copy", False, 0, OptionKind.COPY),
            OptionDescriptor("-C", "--count", True, 3, OptionKind.COUNT),
        )

        state = ParsedArguments.from_table(options)

        assert state.copy_enabled is False
        assert state.list_enabled is True
        assert state.count == 3


class TestApplyOption:
    """Test the option reducer."""

    def test_help(self):
        state = apply_option(OptionKind.HELP, 0, ParsedArguments())

        assert state.help_requested is True

    @pytest.mark.parametrize("value", [0, 1, 42])
    def test_copy_always_enables(self, value):
        state = apply_option(OptionKind.COPY, value, ParsedArguments(copy_flag=0))

        assert state.copy_flag == 1

    @pytest.mark.parametrize("value", [0, 1, 42])
    def test_list_always_enables(self, value):
        state = apply_option(OptionKind.LIST, value, ParsedArguments(list_flag=0))

        assert state.list_flag == 1

    def test_count_stores_value(self):
        assert apply_option(OptionKind.COUNT, 0, ParsedArguments()).count == 0
        assert apply_option(OptionKind.COUNT, 25, ParsedArguments()).count == 25

    def test_input_state_is_unchanged(self):
        state = ParsedArguments()

        apply_option(OptionKind.COUNT, 25, state)

        assert state.count == 10
