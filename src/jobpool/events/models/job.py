"""Events describing a job's passage through the pool."""

from pydantic import Field

from .base import BaseEvent
from .error_info import ErrorInfo


class JobEvent(BaseEvent):
    """Base class for job lifecycle events.

    job_id is assigned by the pool at submission and is unique per pool.
    """

    job_id: int = Field(ge=0, description="Sequence number assigned at submission")
    pool_name: str = Field(description="Name of the pool handling the job")
    event_type: str = Field(default="job.base")


class JobSubmittedEvent(JobEvent):
    """Emitted once a job has been accepted and placed on the queue."""

    event_type: str = Field(default="job.submitted")


class JobStartedEvent(JobEvent):
    """Emitted when a worker picks a job up and begins running it."""

    event_type: str = Field(default="job.started")
    worker_name: str = Field(description="Thread name of the executing worker")


class JobCompletedEvent(JobEvent):
    """Emitted when a job returns normally."""

    event_type: str = Field(default="job.completed")
    worker_name: str = Field(description="Thread name of the executing worker")
    duration_ms: float = Field(default=0.0, ge=0, description="Execution time in ms")


class JobFailedEvent(JobEvent):
    """Emitted when a job raises."""

    event_type: str = Field(default="job.failed")
    worker_name: str = Field(description="Thread name of the executing worker")
    duration_ms: float = Field(default=0.0, ge=0, description="Execution time in ms")
    error: ErrorInfo = Field(description="The exception raised by the job")
