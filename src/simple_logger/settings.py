"""Environment signals consumed when resolving logger defaults.

Colour support is left to rich, which inspects NO_COLOR, FORCE_COLOR and the
terminal itself; everything else the package reads from the environment lives
here.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION = "production"
FALSY_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})


class LoggerEnvironment(BaseSettings):
    """Snapshot of the environment variables that drive default behaviour."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    app_env: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "ENVIRONMENT"),
        description="Deployment environment; 'production' disables printing by default.",
    )
    should_show_time: bool = Field(
        default=True,
        validation_alias="SIMPLE_LOGGER_SHOULD_SHOW_TIME",
        description="Timestamp prefix toggle; only false-like values turn it off.",
    )

    @field_validator("should_show_time", mode="before")
    @classmethod
    def _only_false_like_disables(cls, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() not in FALSY_VALUES

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == PRODUCTION


def load_environment() -> LoggerEnvironment:
    """Read the current environment."""
    return LoggerEnvironment()


__all__ = ["LoggerEnvironment", "load_environment", "FALSY_VALUES", "PRODUCTION"]
