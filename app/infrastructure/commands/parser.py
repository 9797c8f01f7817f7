"""Command-line option parsing and validation."""

from typing import Dict, List, Optional, Sequence, Tuple
import re

from core.logging import get_module_logger
from infrastructure.commands.models import (
    Option,
    OptionKind,
    OptionResult,
    OptionValue,
    ParseErrorKind,
    ParseOutcome,
)

logger = get_module_logger()

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class OptionParseError(Exception):
    """Error during option parsing.

    Attributes:
        kind: ParseErrorKind identifying the failure
        token: The argument token being processed when parsing stopped
        option: The matched option declaration, when there is one
        value: The offending value, for invalid values
    """

    kind: ParseErrorKind

    def __init__(
        self,
        token: str,
        option: Optional[Option] = None,
        value: Optional[str] = None,
    ):
        self.token = token
        self.option = option
        self.value = value
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.kind.message}: {self.token}"


class UnknownOptionError(OptionParseError):
    """Token names an option that is not declared."""

    kind = ParseErrorKind.UNKNOWN_OPTION


class MissingValueError(OptionParseError):
    """A value-taking option received no value."""

    kind = ParseErrorKind.MISSING_VALUE


class InvalidValueError(OptionParseError):
    """An integer option's value is not a decimal integer."""

    kind = ParseErrorKind.INVALID_VALUE

    def _describe(self) -> str:
        return f"{self.kind.message}: {self.value!r} for {self.token}"


def find_short_option(name: str, options: Sequence[Option]) -> Optional[Option]:
    """Return the first option whose short name is `name`."""
    for option in options:
        if option.short == name:
            return option
    return None


def find_long_option(name: str, options: Sequence[Option]) -> Optional[Option]:
    """Return the first option whose long name is exactly `name`."""
    for option in options:
        if option.long is not None and option.long == name:
            return option
    return None


def is_valid_int(text: Optional[str]) -> bool:
    """Check for an optional sign followed by one or more ASCII digits."""
    return text is not None and _INT_PATTERN.fullmatch(text) is not None


class OptionParser:
    """Parse argument tokens against a list of option declarations.

    Handles:
    - Long options: --flag, --name=value, --name value
    - Short options: -f, -svalue, -s=value, -s value
    - Positional arguments, kept in order of appearance
    - Integer syntax validation

    A following token is only taken as a value when it does not start with
    "-". Values that start with "-" must be attached (-n-5, --number=-5).

    Example:
        parser = OptionParser()
        options = [
            Option("f", "flag"),
            Option("s", "string", kind=OptionKind.STRING),
            Option("n", "number", kind=OptionKind.INTEGER),
        ]

        outcome = parser.parse(["-f", "--string=hello", "-n", "7", "pos1"], options)
        # outcome.is_provided("flag") -> True
        # outcome["string"] -> "hello"
        # outcome["number"] -> 7
        # outcome.positionals -> ["pos1"]
    """

    def __init__(self, max_positionals: Optional[int] = None):
        """Initialize parser.

        Args:
            max_positionals: Optional bound on collected positionals. Extra
                positionals are dropped. None means unbounded.
        """
        if max_positionals is not None and max_positionals < 0:
            raise ValueError(f"max_positionals must not be negative: {max_positionals}")
        self.max_positionals = max_positionals

    def parse(self, tokens: Sequence[str], options: Sequence[Option]) -> ParseOutcome:
        """Parse argument tokens into a ParseOutcome.

        Args:
            tokens: Arguments after the program and command names
            options: Option declarations to match against

        Returns:
            ParseOutcome with per-option results and positionals. On failure
            the outcome carries the first error encountered.
        """
        tokens = list(tokens)
        options = list(options)
        found: Dict[int, OptionValue] = {}
        positionals: List[str] = []
        error = None

        try:
            self._parse_tokens(tokens, options, found, positionals)
        except OptionParseError as e:
            logger.warning(
                "option_parse_error",
                kind=e.kind.name,
                token=e.token,
                error=str(e),
            )
            error = e

        results = tuple(
            OptionResult(option=opt, provided=index in found, value=found.get(index))
            for index, opt in enumerate(options)
        )
        if error is None:
            logger.debug(
                "options_parsed",
                provided=[options[index].key for index in sorted(found)],
                positionals=len(positionals),
            )
        return ParseOutcome(results=results, positionals=positionals, error=error)

    def _parse_tokens(
        self,
        tokens: List[str],
        options: List[Option],
        found: Dict[int, OptionValue],
        positionals: List[str],
    ) -> None:
        i = 0
        while i < len(tokens):
            token = tokens[i]

            # Long option
            if token.startswith("--"):
                name, sep, attached = token[2:].partition("=")
                option = find_long_option(name, options)
                if option is None:
                    raise UnknownOptionError(token)

                value = attached if sep else None
                if option.kind.takes_value and value is None:
                    value, i = self._take_next(tokens, i, option)

            # Short option
            elif token.startswith("-") and len(token) > 1:
                option = find_short_option(token[1], options)
                if option is None:
                    raise UnknownOptionError(token)

                value = None
                if option.kind.takes_value:
                    if len(token) > 2:
                        # -n=42 reads the same as -n42
                        value = token[3:] if token[2] == "=" else token[2:]
                    else:
                        value, i = self._take_next(tokens, i, option)

            # Positional argument (including a bare "-")
            else:
                self._add_positional(positionals, token)
                i += 1
                continue

            # Keyed by position so equal declarations stay distinct
            index = next(n for n, opt in enumerate(options) if opt is option)
            found[index] = self._convert(option, value, token)
            i += 1

    def _take_next(
        self, tokens: List[str], i: int, option: Option
    ) -> Tuple[str, int]:
        """Consume the token after position `i` as the option's value.

        Raises:
            MissingValueError: At end of input or if the next token looks
                like an option
        """
        if i + 1 < len(tokens) and not tokens[i + 1].startswith("-"):
            return tokens[i + 1], i + 1
        raise MissingValueError(tokens[i], option=option)

    def _add_positional(self, positionals: List[str], token: str) -> None:
        if self.max_positionals is not None and len(positionals) >= self.max_positionals:
            logger.debug(
                "positional_dropped",
                token=token,
                max_positionals=self.max_positionals,
            )
            return
        positionals.append(token)

    def _convert(
        self, option: Option, value: Optional[str], token: str
    ) -> OptionValue:
        """Convert a captured value according to the option kind.

        Raises:
            InvalidValueError: If an integer value has invalid syntax
        """
        if option.kind == OptionKind.FLAG:
            return None
        if option.kind == OptionKind.STRING:
            return value

        if not is_valid_int(value):
            raise InvalidValueError(token, option=option, value=value)
        try:
            return int(value)
        except ValueError:
            # Digit strings past the interpreter's int conversion limit
            raise InvalidValueError(token, option=option, value=value) from None


def parse_argv(
    argv: Sequence[str],
    options: Sequence[Option],
    max_positionals: Optional[int] = None,
) -> ParseOutcome:
    """Parse a full argument vector, skipping program and command names."""
    return OptionParser(max_positionals=max_positionals).parse(argv[2:], options)
