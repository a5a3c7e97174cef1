"""Events describing worker and pool lifecycle."""

from pydantic import Field

from .base import BaseEvent


class WorkerStartedEvent(BaseEvent):
    """Emitted when a worker thread enters its consume loop."""

    event_type: str = Field(default="worker.started")
    pool_name: str
    worker_name: str


class WorkerStoppedEvent(BaseEvent):
    """Emitted when a worker thread leaves its consume loop."""

    event_type: str = Field(default="worker.stopped")
    pool_name: str
    worker_name: str
    jobs_executed: int = Field(default=0, ge=0)


class PoolClosedEvent(BaseEvent):
    """Emitted once, when the pool stops accepting submissions."""

    event_type: str = Field(default="pool.closed")
    pool_name: str
    outstanding: int = Field(
        default=0, ge=0, description="Jobs still pending or running at close time"
    )
