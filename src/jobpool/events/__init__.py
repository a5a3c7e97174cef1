"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter
from .models import (
    BaseEvent,
    ErrorInfo,
    JobCompletedEvent,
    JobEvent,
    JobFailedEvent,
    JobStartedEvent,
    JobSubmittedEvent,
    PoolClosedEvent,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "NullEmitter",
    # Models
    "BaseEvent",
    "ErrorInfo",
    # Job events
    "JobEvent",
    "JobSubmittedEvent",
    "JobStartedEvent",
    "JobCompletedEvent",
    "JobFailedEvent",
    # Lifecycle events
    "WorkerStartedEvent",
    "WorkerStoppedEvent",
    "PoolClosedEvent",
]
