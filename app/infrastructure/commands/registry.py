"""Command registry for registration and dispatch."""

from typing import Callable, Dict, List, Optional, Sequence, TextIO

from core.config import settings
from core.logging import get_module_logger
from infrastructure.commands.context import CommandContext
from infrastructure.commands.help import format_usage
from infrastructure.commands.models import Command, Option
from infrastructure.commands.parser import OptionParser

logger = get_module_logger()


class CommandRegistry:
    """Registry mapping command names to handlers with option schemas.

    Attributes:
        namespace: Name used in log context and usage text
        _commands: Dict of registered commands, in registration order

    Example:
        registry = CommandRegistry("program")

        @registry.command(
            name="greet",
            description="Greet someone",
            options=[Option("n", "name", kind=OptionKind.STRING)],
        )
        def greet(ctx: CommandContext, outcome: ParseOutcome):
            ctx.respond(f"Hello, {outcome.get('name', 'world')}!")

        exit_code = registry.dispatch(["program", "greet", "--name=Ada"])
    """

    def __init__(self, namespace: str, parser: Optional[OptionParser] = None):
        """Initialize registry.

        Args:
            namespace: Program or module namespace for commands
            parser: OptionParser used for every command. Defaults to one
                bounded by settings.parser.MAX_POSITIONALS.
        """
        self.namespace = namespace
        self.parser = parser or OptionParser(
            max_positionals=settings.parser.MAX_POSITIONALS
        )
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command) -> Command:
        """Register a Command object.

        Raises:
            ValueError: If a command with the same name is already registered
        """
        if command.name in self._commands:
            raise ValueError(
                f"Command '{command.name}' already registered in {self.namespace}"
            )
        self._commands[command.name] = command
        logger.debug("registered command", namespace=self.namespace, name=command.name)
        return command

    def command(
        self,
        name: str,
        description: str = "",
        options: List[Option] = None,
        usage: str = "",
    ) -> Callable:
        """Decorator to register a command with handler.

        Args:
            name: Command name
            description: Human-readable description
            options: List of Option declarations
            usage: Extra usage text shown after the options

        Returns:
            Decorator function that registers the handler
        """

        def decorator(handler: Callable) -> Callable:
            self.register(
                Command(
                    name=name,
                    handler=handler,
                    description=description,
                    options=options or [],
                    usage=usage,
                )
            )
            return handler

        return decorator

    def get_command(self, name: str) -> Optional[Command]:
        """Get command by name, or None if not found."""
        return self._commands.get(name)

    def list_commands(self) -> List[Command]:
        """Get all registered commands in registration order."""
        return list(self._commands.values())

    def usage(self, program: Optional[str] = None) -> str:
        """Usage text listing all registered commands."""
        return format_usage(program or self.namespace, self.list_commands())

    def dispatch(self, argv: Sequence[str], stdout: Optional[TextIO] = None) -> int:
        """Run the command named by argv[1].

        The command's options are parsed from argv[2:]. Parse failures are
        reported to the user and the handler is not called.

        Args:
            argv: Full argument vector (program name first)
            stdout: Stream for user-facing output (defaults to sys.stdout)

        Returns:
            Process exit status: the handler's integer result (0 when it
            returns None), or 1 for a missing/unknown command or a parse error
        """
        argv = list(argv)
        program = self.namespace

        if len(argv) < 2:
            CommandContext(command=None, argv=argv, program=program, stdout=stdout).respond(
                self.usage(program)
            )
            return 1

        name = argv[1]
        command = self.get_command(name)
        if command is None:
            logger.warning("unknown_command", namespace=self.namespace, name=name)
            ctx = CommandContext(command=None, argv=argv, program=program, stdout=stdout)
            ctx.respond(f"Unknown command: {name}")
            ctx.respond(self.usage(program))
            return 1

        ctx = CommandContext(command=command, argv=argv, program=program, stdout=stdout)
        outcome = self.parser.parse(ctx.arguments, command.options)
        if not outcome.ok:
            ctx.respond(f"Error: {outcome.error}")
            return 1

        logger.info(
            "command_dispatched",
            namespace=self.namespace,
            name=name,
            options=outcome.as_dict(),
            positionals=len(outcome.positionals),
        )
        result = command.handler(ctx, outcome)
        return 0 if result is None else int(result)
