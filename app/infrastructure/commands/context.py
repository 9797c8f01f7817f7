"""Command execution context."""

from dataclasses import dataclass, field
from typing import List, Optional, TextIO
import sys

from infrastructure.commands.models import Command


@dataclass
class CommandContext:
    """Execution context handed to command handlers.

    Attributes:
        command: The Command being executed, None outside a command
        argv: Full argument vector (program name, command name, arguments)
        program: Program name used in usage text
        stdout: Stream responses are written to (defaults to sys.stdout)

    Example:
        def handle_foo(ctx: CommandContext, outcome: ParseOutcome):
            ctx.respond("Executing foo command")
    """

    command: Optional[Command]
    argv: List[str] = field(default_factory=list)
    program: str = "program"
    stdout: Optional[TextIO] = None

    def respond(self, text: str = "") -> None:
        """Write a line of output for the user."""
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(f"{text}\n")

    @property
    def arguments(self) -> List[str]:
        """Arguments after the program and command names."""
        return self.argv[2:]
