"""Configuration: frozen Config with environment resolution.

Precedence is defaults < ``MONADKIT_*`` environment variables < explicit
overrides. A project ``.env`` file is loaded before the environment is read.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from monadkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "MONADKIT_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Pydantic schema for values read from the environment.

    Raw environment strings are coerced here (``"false"`` -> ``False``,
    ``"0.25"`` -> ``0.25``) before the frozen ``Config`` is built.
    """

    thread_safe: bool = True
    magic_delay_s: float = Field(default=1.0, ge=0)
    stream_preview: int = Field(default=10, ge=1)
    log_level: str = "WARNING"

    model_config = {"extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v


@dataclass(frozen=True)
class Config:
    """Immutable settings for the demos and default container behavior.

    Example:
        config = Config(magic_delay_s=0.0)
        # or, from MONADKIT_* environment variables:
        config = Config.from_env()
    """

    #: Guard Lazy cache population with a one-time lock.
    thread_safe: bool = True
    #: Simulated cost of the "expensive" value in the call-by-need demo.
    magic_delay_s: float = 1.0
    #: How many stream elements the stream demo prints.
    stream_preview: int = 10
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate numeric fields and normalize the log level."""
        if self.magic_delay_s < 0:
            raise ConfigurationError(
                f"magic_delay_s must be ≥ 0, got {self.magic_delay_s}",
                hint="Use 0 to skip the simulated delay.",
            )
        if self.stream_preview < 1:
            raise ConfigurationError(
                f"stream_preview must be ≥ 1, got {self.stream_preview}",
                hint="This controls how many stream elements are printed.",
            )
        level = str(self.log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log_level: {self.log_level!r}",
                hint=f"Supported levels: {', '.join(_LOG_LEVELS)}",
            )
        object.__setattr__(self, "log_level", level)

    @property
    def logging_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, overrides: Mapping[str, Any] | None = None) -> Config:
        """Resolve a Config from ``.env``, the environment and ``overrides``."""
        load_dotenv()
        merged: dict[str, Any] = dict(load_env())
        merged.update(overrides or {})
        try:
            settings = Settings.model_validate(merged)
        except ValidationError as e:
            # Extract first error for clarity
            err = e.errors()[0]
            field = ".".join(str(p) for p in err.get("loc", ()))
            msg = err.get("msg", "")
            if msg.startswith("Value error, "):
                msg = msg[13:]
            raise ConfigurationError(
                f"Configuration validation failed for {field or 'config'}: {msg}",
                hint=f"Check the {ENV_PREFIX}{field.upper()} environment variable."
                if field
                else None,
            ) from e
        return cls(**settings.model_dump())

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_env() -> dict[str, str]:
    """Return ``MONADKIT_*`` variables keyed by lower-cased field name.

    Unknown names are kept here and dropped by the schema.
    """
    return {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }


__all__ = ["ENV_PREFIX", "Config", "Settings", "load_env"]
