"""Fixtures for option parsing and command dispatch tests."""

import pytest

from infrastructure.commands.parser import OptionParser
from infrastructure.commands.registry import CommandRegistry


@pytest.fixture
def option_parser():
    """Unbounded OptionParser instance for parsing tests."""
    return OptionParser()


@pytest.fixture
def command_registry_factory():
    """Factory for creating CommandRegistry instances.

    Returns:
        Callable that creates CommandRegistry with an unbounded parser
    """

    def _factory(namespace: str = "program", max_positionals: int = None):
        return CommandRegistry(
            namespace, parser=OptionParser(max_positionals=max_positionals)
        )

    return _factory
