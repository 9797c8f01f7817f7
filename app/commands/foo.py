from infrastructure.commands import (
    CommandContext,
    CommandRegistry,
    Option,
    OptionKind,
    ParseOutcome,
)

FOO_OPTIONS = [
    Option("f", "flag", help="Set the example flag"),
    Option("s", "string", kind=OptionKind.STRING, help="Example string value"),
    Option("n", "number", kind=OptionKind.INTEGER, help="Example integer value"),
]


def register(registry: CommandRegistry):
    registry.command(
        name="foo",
        description="Example command with various options and positionals",
        options=FOO_OPTIONS,
        usage="[ARG...]",
    )(foo_command)


def foo_command(ctx: CommandContext, outcome: ParseOutcome):
    ctx.respond("Executing foo command")

    if outcome.is_provided("flag"):
        ctx.respond("Flag is set!")

    ctx.respond(f"String value: {outcome.get('string', 'default')}")

    if outcome.is_provided("number"):
        ctx.respond(f"Number value: {outcome['number']}")

    if outcome.positionals:
        ctx.respond("Positional arguments:")
        for index, arg in enumerate(outcome.positionals):
            ctx.respond(f"\t[{index}] {arg}")
