"""Runtime configuration, env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
SINKJOIN_* environment variables.  The join functions consult the
module-level ``settings`` object at call time, so tests and applications
may replace its fields without re-importing anything.
"""

from __future__ import annotations

import codecs

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library and CLI configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SINKJOIN_ENCODING=utf-16-le
        export SINKJOIN_RESERVE=false
        export SINKJOIN_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SINKJOIN_",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    # Text -> bytes conversion for sinks without write_string()
    encoding: str = "utf-8"
    errors: str = "strict"

    # Issue reserve() hints to sinks that accept them
    reserve: bool = True

    # CLI only; the library never configures logging
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value!r}") from exc

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


# Module-level singleton; import as `from sinkjoin.config import settings`
settings = Settings()
