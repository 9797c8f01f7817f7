"""Command-line option parsing and command dispatch.

This package provides:
- OptionParser: Classify argument tokens into options and positionals
- CommandRegistry: Register commands and dispatch an argument vector
- CommandContext: Execution context handed to command handlers

Example:
    from infrastructure.commands import (
        CommandRegistry, CommandContext, Option, OptionKind
    )

    registry = CommandRegistry("program")

    @registry.command(
        name="hello",
        description="Say hello to someone",
        options=[Option("n", "name", kind=OptionKind.STRING)],
    )
    def hello_command(ctx: CommandContext, outcome):
        ctx.respond(f"Hello, {outcome.get('name', 'world')}!")

    sys.exit(registry.dispatch(sys.argv))
"""

from infrastructure.commands.models import (
    Command,
    Option,
    OptionKind,
    OptionResult,
    ParseErrorKind,
    ParseOutcome,
)
from infrastructure.commands.parser import (
    OptionParser,
    OptionParseError,
    UnknownOptionError,
    MissingValueError,
    InvalidValueError,
    find_short_option,
    find_long_option,
    is_valid_int,
    parse_argv,
)
from infrastructure.commands.context import CommandContext
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.help import format_command_help, format_usage

__all__ = [
    # Models
    "Command",
    "Option",
    "OptionKind",
    "OptionResult",
    "ParseErrorKind",
    "ParseOutcome",
    # Parsing
    "OptionParser",
    "OptionParseError",
    "UnknownOptionError",
    "MissingValueError",
    "InvalidValueError",
    "find_short_option",
    "find_long_option",
    "is_valid_int",
    "parse_argv",
    # Dispatch
    "CommandContext",
    "CommandRegistry",
    # Help
    "format_command_help",
    "format_usage",
]
