"""Domain models and exceptions."""

from .config import LARGE, MEDIUM, SMALL, JobPoolConfig
from .exceptions import (
    CounterUnderflowError,
    InvalidJobError,
    JobPoolError,
    PoolClosedError,
    PoolNotClosedError,
    QueueClosedError,
    QueueError,
    WaitCancelledError,
    WaitTimeoutError,
)

__all__ = [
    "JobPoolConfig",
    "SMALL",
    "MEDIUM",
    "LARGE",
    "JobPoolError",
    "InvalidJobError",
    "PoolClosedError",
    "PoolNotClosedError",
    "WaitCancelledError",
    "WaitTimeoutError",
    "QueueError",
    "QueueClosedError",
    "CounterUnderflowError",
]
