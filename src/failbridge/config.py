"""Configuration: frozen diagnostics settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from failbridge.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

load_dotenv()

SWALLOWED_LOG_LEVEL_ENV = "FAILBRIDGE_SWALLOWED_LOG_LEVEL"


def _parse_level(raw: str) -> int:
    value = raw.strip()
    if value.isdecimal():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(
            f"Unknown log level {raw!r} in {SWALLOWED_LOG_LEVEL_ENV}",
            hint="Use a level name such as DEBUG or WARNING, or a non-negative integer.",
        )
    return level


@dataclass(frozen=True)
class Config:
    """Immutable diagnostics configuration.

    Only affects what gets logged; never changes how a failure is relocated.

    Example:
        config = Config(swallowed_log_level=logging.WARNING)
        quiet_read = read.as_handled(lambda failure: b"", config=config)
    """

    #: Level at which a handler-swallowed failure is logged.
    swallowed_log_level: int = logging.DEBUG

    def __post_init__(self) -> None:
        """Validate the log level."""
        if isinstance(self.swallowed_log_level, bool) or not isinstance(
            self.swallowed_log_level, int
        ):
            raise ConfigurationError(
                f"swallowed_log_level must be an int, got {type(self.swallowed_log_level).__name__}",
                hint="Pass a logging constant such as logging.DEBUG.",
            )
        if self.swallowed_log_level < 0:
            raise ConfigurationError(
                f"swallowed_log_level must be ≥ 0, got {self.swallowed_log_level}",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Resolve configuration from ``environ`` (defaults to ``os.environ``).

        Unset or blank variables fall back to the dataclass defaults.
        """
        env = os.environ if environ is None else environ
        raw = env.get(SWALLOWED_LOG_LEVEL_ENV)
        if raw is None or not raw.strip():
            return cls()
        return cls(swallowed_log_level=_parse_level(raw))
