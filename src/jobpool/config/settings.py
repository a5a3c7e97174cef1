"""Application settings populated from the environment."""

import typing as t
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings container for logging and default pool sizing.

    Every field can be overridden with a ``JOBPOOL_`` prefixed environment
    variable, e.g. ``JOBPOOL_WORKER_COUNT=4``.
    """

    model_config = SettingsConfigDict(env_prefix="JOBPOOL_", frozen=True)

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    worker_count: int = Field(default=10, description="Default number of workers")
    queue_size: int = Field(default=100, description="Default queue capacity")


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets callers pass optional values straight through without clobbering
    environment or default values.
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
