"""Command-line parser configuration settings."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """Option parsing engine settings.

    Environment Variables:
        MAX_POSITIONALS: Upper bound on collected positional arguments.
            Unset means unbounded. Positionals past the bound are dropped.
    """

    MAX_POSITIONALS: Optional[int] = Field(default=None, alias="MAX_POSITIONALS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("MAX_POSITIONALS", mode="before")
    @classmethod
    def _parse_max_positionals(cls, v: Optional[Any]) -> Any:
        """Treat an empty value as unbounded and reject non-positive bounds."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        value = int(v)
        if value < 1:
            raise ValueError(f"MAX_POSITIONALS must be positive, got {value}")
        return value


class Settings(BaseSettings):
    """Application configuration settings.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PROGRAM_NAME: Program name shown in usage text
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    PROGRAM_NAME: str = "program"

    parser: ParserSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """True when no environment prefix is set."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "parser" not in kwargs:
            kwargs["parser"] = ParserSettings()
        super().__init__(**kwargs)


settings = Settings()
