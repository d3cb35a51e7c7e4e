"""Application configuration contract."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cmdtable.errors import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="CMDTABLE_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")
    separators: str = Field(alias="CMDTABLE_SEPARATORS", default=" \t\r\n")
    prompt: str = Field(alias="CMDTABLE_PROMPT", default="? ")
    max_line_length: int = Field(alias="CMDTABLE_MAX_LINE_LENGTH", default=256)
    output_prefix: str = Field(alias="CMDTABLE_OUTPUT_PREFIX", default="")


def validate_settings(settings: Settings) -> None:
    _logger = logging.getLogger(__name__)

    problems: list[str] = []
    if not settings.separators:
        problems.append("CMDTABLE_SEPARATORS(at least one character required)")
    if settings.max_line_length <= 0:
        problems.append("CMDTABLE_MAX_LINE_LENGTH(must be > 0)")
    if settings.log_level.upper() not in _LOG_LEVELS:
        problems.append(f"LOG_LEVEL(unknown level {settings.log_level!r})")

    if settings.app_env == "prod" and settings.log_level.upper() == "DEBUG":
        _logger.warning("LOG_LEVEL=DEBUG in production logs every dispatched line")

    if problems:
        keys = ", ".join(problems)
        raise ConfigError(f"invalid configuration: {keys}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
