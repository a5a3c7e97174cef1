"""Logging setup built on loguru.

Library modules call get_logger(__name__) and never configure sinks
themselves, so a host application keeps whatever loguru sinks it installed.
Applications that want jobpool's own sink call setup_logging() (or
create_app()) once at boot.
"""

import sys
import threading
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<magenta>{thread.name}</magenta> - <level>{message}</level>"
)

_lock = threading.Lock()
_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's sinks with a single stderr sink.

    Production output is serialized to JSON; other environments get the
    coloured human-readable format.
    """
    global _configured
    with _lock:
        logger.remove()
        logger.configure(extra={"name": "jobpool"})
        if environment == Environment.PRODUCTION:
            logger.add(sys.stderr, level=level.value, serialize=True, enqueue=True)
        else:
            logger.add(
                sys.stderr,
                level=level.value,
                format=_DEV_FORMAT,
                colorize=environment == Environment.DEVELOPMENT,
                backtrace=environment == Environment.DEVELOPMENT,
            )
        _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to the given module name. Sinks are left untouched."""
    return logger.bind(name=name)


def is_configured() -> bool:
    """Whether configure_logger() has installed jobpool's sink."""
    return _configured


def reset_logging() -> None:
    """Drop all sinks and forget the configuration. Used by tests."""
    global _configured
    with _lock:
        logger.remove()
        _configured = False
