"""Infrastructure modules for the command-line parser.

Centralized infrastructure components:
- commands: Option parsing engine, command registry and dispatch
"""

from infrastructure.commands import (
    CommandRegistry,
    OptionParser,
    ParseOutcome,
)

__all__ = [
    "CommandRegistry",
    "OptionParser",
    "ParseOutcome",
]
