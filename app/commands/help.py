from infrastructure.commands import (
    CommandContext,
    CommandRegistry,
    ParseOutcome,
    format_command_help,
)


def register(registry: CommandRegistry):
    def help_command(ctx: CommandContext, outcome: ParseOutcome):
        if not outcome.positionals:
            ctx.respond(registry.usage(ctx.program))
            return None

        name = outcome.positionals[0]
        command = registry.get_command(name)
        if command is None:
            ctx.respond(f"Unknown command: {name}")
            ctx.respond(registry.usage(ctx.program))
            return 1
        ctx.respond(format_command_help(ctx.program, command))
        return None

    registry.command(
        name="help",
        description="Show this message",
        usage="[COMMAND]",
    )(help_command)
