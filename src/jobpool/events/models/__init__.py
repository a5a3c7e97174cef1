"""Event data models."""

from .base import BaseEvent
from .error_info import ErrorInfo
from .job import (
    JobCompletedEvent,
    JobEvent,
    JobFailedEvent,
    JobStartedEvent,
    JobSubmittedEvent,
)
from .worker import PoolClosedEvent, WorkerStartedEvent, WorkerStoppedEvent

__all__ = [
    "BaseEvent",
    "ErrorInfo",
    "JobEvent",
    "JobSubmittedEvent",
    "JobStartedEvent",
    "JobCompletedEvent",
    "JobFailedEvent",
    "WorkerStartedEvent",
    "WorkerStoppedEvent",
    "PoolClosedEvent",
]
