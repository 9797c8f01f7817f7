"""Shared pytest fixtures."""

import io
from typing import Optional

import pytest

from infrastructure.commands.models import Option, OptionKind


@pytest.fixture
def option_factory():
    """Factory for creating Option declarations for testing.

    Returns:
        Callable that creates Option with default or custom values
    """

    def _factory(
        short: str = "f",
        long: str = "flag",
        kind: OptionKind = OptionKind.FLAG,
        help: str = "",
        metavar: Optional[str] = None,
    ):
        return Option(short=short, long=long, kind=kind, help=help, metavar=metavar)

    return _factory


@pytest.fixture
def example_options():
    """Flag, string and integer options used across parser and CLI tests."""
    return [
        Option("f", "flag"),
        Option("s", "string", kind=OptionKind.STRING),
        Option("n", "number", kind=OptionKind.INTEGER),
    ]


@pytest.fixture
def output_stream():
    """In-memory stream for capturing command output."""
    return io.StringIO()
