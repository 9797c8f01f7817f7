"""Option parsing data models."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple, Union
from enum import Enum

if TYPE_CHECKING:
    from infrastructure.commands.parser import OptionParseError


OptionValue = Union[str, int, None]


class OptionKind(Enum):
    """Supported option value kinds."""

    FLAG = "flag"
    STRING = "string"
    INTEGER = "integer"

    @property
    def takes_value(self) -> bool:
        """Whether options of this kind consume a value."""
        return self is not OptionKind.FLAG


class ParseErrorKind(Enum):
    """Reasons a parse pass can fail, with their user-facing messages."""

    UNKNOWN_OPTION = "Unknown option"
    MISSING_VALUE = "Missing option value"
    INVALID_VALUE = "Invalid option value"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Option:
    """Option declaration.

    Attributes:
        short: Single-character short name (e.g., "f" for -f)
        long: Long name (e.g., "flag" for --flag)
        kind: OptionKind controlling whether and how a value is captured
        help: Human-readable description, used only for help output
        metavar: Placeholder shown for the value in help output

    Examples:
        Flag: Option("f", "flag")
        String: Option("s", "string", kind=OptionKind.STRING)
        Long only: Option(long="number", kind=OptionKind.INTEGER)
    """

    short: Optional[str] = None
    long: Optional[str] = None
    kind: OptionKind = OptionKind.FLAG
    help: str = ""
    metavar: Optional[str] = None

    def __post_init__(self):
        """Validate option names."""
        if self.short is None and self.long is None:
            raise ValueError("Option needs a short or a long name")
        if self.short is not None and (len(self.short) != 1 or self.short == "-"):
            raise ValueError(
                f"Short option name must be a single character other than '-': {self.short!r}"
            )
        if self.long is not None:
            if not self.long or self.long.startswith("-") or "=" in self.long:
                raise ValueError(f"Invalid long option name: {self.long!r}")

    @property
    def key(self) -> str:
        """Identity used in result mappings: long name, else short name."""
        return self.long if self.long is not None else self.short

    def spellings(self) -> List[str]:
        """Command-line spellings of this option (e.g., ["-f", "--flag"])."""
        names = []
        if self.short is not None:
            names.append(f"-{self.short}")
        if self.long is not None:
            names.append(f"--{self.long}")
        return names

    def matches(self, name: str) -> bool:
        """Whether `name` is this option's short or long name."""
        return name in (self.short, self.long)


@dataclass(frozen=True)
class OptionResult:
    """Outcome of one option for a single parse pass.

    Attributes:
        option: The declaration this result belongs to
        provided: Whether the option appeared on the command line
        value: Captured value (str for STRING, int for INTEGER, None for FLAG
            or when not provided)
    """

    option: Option
    provided: bool = False
    value: OptionValue = None


@dataclass
class ParseOutcome:
    """Result of a parse pass.

    Holds one OptionResult per declared option, in declaration order, and the
    positional arguments in order of appearance. A failed pass also carries
    the error that stopped it; results gathered before the error are kept.

    Example:
        outcome = OptionParser().parse(["-n", "7", "file"], options)
        if outcome.ok:
            outcome["number"]        # 7
            outcome.positionals      # ["file"]
    """

    results: Tuple[OptionResult, ...] = ()
    positionals: List[str] = field(default_factory=list)
    error: Optional["OptionParseError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[ParseErrorKind]:
        return self.error.kind if self.error is not None else None

    def result(self, name: str) -> OptionResult:
        """Find the result for an option by short or long name.

        Raises:
            KeyError: If no declared option has that name
        """
        for res in self.results:
            if res.option.matches(name):
                return res
        raise KeyError(name)

    def is_provided(self, name: str) -> bool:
        return self.result(name).provided

    def get(self, name: str, default: Any = None) -> Any:
        """Return the option's value, or `default` when it has none."""
        res = self.result(name)
        if not res.provided or res.value is None:
            return default
        return res.value

    def __getitem__(self, name: str) -> OptionValue:
        return self.result(name).value

    def as_dict(self) -> Dict[str, OptionValue]:
        """Map option keys to values for every provided option.

        Flags map to True.
        """
        values: Dict[str, OptionValue] = {}
        for res in self.results:
            if res.provided and res.option.key not in values:
                values[res.option.key] = True if res.value is None else res.value
        return values

    def raise_for_error(self) -> "ParseOutcome":
        """Raise the stored error, if any, otherwise return self."""
        if self.error is not None:
            raise self.error
        return self


@dataclass
class Command:
    """Command definition with its option schema.

    Attributes:
        name: Command name, matched against the first argument
        handler: Callable invoked as handler(ctx, outcome)
        description: Human-readable description for usage output
        options: Option declarations accepted by the command
        usage: Extra usage text (e.g., "[FILE...]") shown after the options
    """

    name: str
    handler: Callable
    description: str = ""
    options: List[Option] = field(default_factory=list)
    usage: str = ""
