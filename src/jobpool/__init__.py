"""jobpool - a bounded worker pool with completion tracking."""

from .app import App, create_app
from .cancellation import DEADLINE_EXCEEDED, CancellationToken
from .config import Environment, LogLevel, Settings, build_settings
from .domain import (
    LARGE,
    MEDIUM,
    SMALL,
    InvalidJobError,
    JobPoolConfig,
    JobPoolError,
    PoolClosedError,
    PoolNotClosedError,
    WaitCancelledError,
    WaitTimeoutError,
)
from .events import EventEmitter, NullEmitter
from .pool import JobPool, large_pool, medium_pool, small_pool

__all__ = [
    # Pool
    "JobPool",
    "small_pool",
    "medium_pool",
    "large_pool",
    "JobPoolConfig",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "CancellationToken",
    "DEADLINE_EXCEEDED",
    # Errors
    "JobPoolError",
    "InvalidJobError",
    "PoolClosedError",
    "PoolNotClosedError",
    "WaitCancelledError",
    "WaitTimeoutError",
    # Events
    "EventEmitter",
    "NullEmitter",
    # App and config
    "App",
    "create_app",
    "Settings",
    "Environment",
    "LogLevel",
    "build_settings",
]
