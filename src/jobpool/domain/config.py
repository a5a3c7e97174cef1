"""Pool sizing configuration and named presets."""

import typing as t

from pydantic import BaseModel, ConfigDict, Field


class JobPoolConfig(BaseModel):
    """Parameter bundle for constructing a JobPool.

    Values are deliberately not required to be positive. A non-positive
    worker_count produces a pool that never executes work, and a non-positive
    queue_size produces a pool whose submissions hand off directly to an idle
    worker. See JobPool for the full behaviour.
    """

    model_config = ConfigDict(frozen=True)

    worker_count: int = Field(description="Number of long-lived worker threads")
    queue_size: int = Field(description="Capacity of the pending job queue")
    name: str = Field(default="jobpool", description="Name used in logs and threads")

    @classmethod
    def small(cls, **overrides: t.Any) -> "JobPoolConfig":
        """10 workers, 100 queue slots."""
        return cls.model_validate({**SMALL.model_dump(), **overrides})

    @classmethod
    def medium(cls, **overrides: t.Any) -> "JobPoolConfig":
        """50 workers, 500 queue slots."""
        return cls.model_validate({**MEDIUM.model_dump(), **overrides})

    @classmethod
    def large(cls, **overrides: t.Any) -> "JobPoolConfig":
        """100 workers, 1000 queue slots."""
        return cls.model_validate({**LARGE.model_dump(), **overrides})


SMALL = JobPoolConfig(worker_count=10, queue_size=100, name="small")
MEDIUM = JobPoolConfig(worker_count=50, queue_size=500, name="medium")
LARGE = JobPoolConfig(worker_count=100, queue_size=1000, name="large")
