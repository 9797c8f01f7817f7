import sys
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from commands import foo, help as help_cmd
from core.config import settings
from core.logging import get_module_logger
from infrastructure.commands import CommandRegistry

logger = get_module_logger()

load_dotenv()


def build_registry(program: Optional[str] = None) -> CommandRegistry:
    """Create the command registry with every command registered."""
    registry = CommandRegistry(program or settings.PROGRAM_NAME)

    # Register example command
    foo.register(registry)

    # Register help command
    help_cmd.register(registry)

    return registry


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    """Dispatch the command named in argv and return the exit status."""
    argv = list(sys.argv if argv is None else argv)
    registry = build_registry()
    logger.debug("application_startup", argv_length=len(argv))
    return registry.dispatch(argv, stdout=stdout)


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
