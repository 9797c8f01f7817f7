"""Usage and help text generation for registered commands."""

from typing import Iterable, List

from infrastructure.commands.models import Command, Option, OptionKind

_OPTION_COLUMN_MAX = 30


def format_option(option: Option) -> str:
    """Render an option's spellings and value placeholder.

    Example:
        format_option(Option("n", "number", kind=OptionKind.INTEGER))
        # "-n, --number <int>"
    """
    text = ", ".join(option.spellings())
    if option.kind.takes_value:
        metavar = option.metavar or ("int" if option.kind == OptionKind.INTEGER else "value")
        text += f" <{metavar}>"
    return text


def format_options(options: Iterable[Option]) -> List[str]:
    """Render one aligned line per option with its help text."""
    rendered = [(format_option(opt), opt.help) for opt in options]
    if not rendered:
        return []

    width = min(max(len(spec) for spec, _ in rendered), _OPTION_COLUMN_MAX)
    lines = []
    for spec, help_text in rendered:
        if not help_text:
            lines.append(f"  {spec}")
        elif len(spec) > width:
            lines.append(f"  {spec}")
            lines.append(f"  {'':<{width}}  {help_text}")
        else:
            lines.append(f"  {spec:<{width}}  {help_text}")
    return lines


def format_usage(program: str, commands: Iterable[Command]) -> str:
    """Generate the program usage text listing every command."""
    commands = list(commands)
    lines = [f"Usage: {program} <command> [options]", "", "Commands:"]

    width = max((len(cmd.name) for cmd in commands), default=0)
    for cmd in commands:
        lines.append(f"  {cmd.name:<{width}}  {cmd.description}".rstrip())

    return "\n".join(lines)


def format_command_help(program: str, command: Command) -> str:
    """Generate help text for a single command, including its options."""
    usage = f"Usage: {program} {command.name}"
    if command.options:
        usage += " [options]"
    if command.usage:
        usage += f" {command.usage}"

    lines = [usage]
    if command.description:
        lines.extend(["", command.description])
    if command.options:
        lines.extend(["", "Options:"])
        lines.extend(format_options(command.options))

    return "\n".join(lines)
