"""Unit tests for usage and help text generation."""

from unittest.mock import MagicMock

from infrastructure.commands.help import (
    format_command_help,
    format_option,
    format_options,
    format_usage,
)
from infrastructure.commands.models import Command, Option, OptionKind


class TestFormatOption:
    """Tests for single option rendering."""

    def test_flag(self):
        assert format_option(Option("f", "flag")) == "-f, --flag"

    def test_value_placeholders(self):
        assert format_option(Option("s", "string", kind=OptionKind.STRING)) == (
            "-s, --string <value>"
        )
        assert format_option(Option(long="number", kind=OptionKind.INTEGER)) == (
            "--number <int>"
        )

    def test_custom_metavar(self):
        opt = Option("o", "output", kind=OptionKind.STRING, metavar="FILE")
        assert format_option(opt) == "-o, --output <FILE>"


class TestFormatOptions:
    """Tests for the aligned option table."""

    def test_alignment(self):
        lines = format_options(
            [
                Option("f", "flag", help="Set the flag"),
                Option("n", "number", kind=OptionKind.INTEGER, help="A number"),
            ]
        )

        assert lines == [
            "  -f, --flag          Set the flag",
            "  -n, --number <int>  A number",
        ]

    def test_option_without_help(self):
        assert format_options([Option("f", "flag")]) == ["  -f, --flag"]

    def test_empty(self):
        assert format_options([]) == []


class TestFormatUsage:
    """Tests for program usage text."""

    def test_lists_commands(self):
        commands = [
            Command(name="foo", handler=MagicMock(), description="Example command"),
            Command(name="help", handler=MagicMock(), description="Show this message"),
        ]

        assert format_usage("program", commands) == (
            "Usage: program <command> [options]\n"
            "\n"
            "Commands:\n"
            "  foo   Example command\n"
            "  help  Show this message"
        )

    def test_command_help(self):
        command = Command(
            name="foo",
            handler=MagicMock(),
            description="Example command",
            options=[Option("f", "flag", help="Set the flag")],
            usage="[ARG...]",
        )

        assert format_command_help("program", command) == (
            "Usage: program foo [options] [ARG...]\n"
            "\n"
            "Example command\n"
            "\n"
            "Options:\n"
            "  -f, --flag  Set the flag"
        )

    def test_command_help_without_options(self):
        command = Command(name="help", handler=MagicMock())

        assert format_command_help("program", command) == "Usage: program help"
