"""Worker pool - queue, counter, workers and the pool itself."""

from .counter import OutstandingCounter
from .factory import JobPoolFactory
from .pool import JobPool, large_pool, medium_pool, small_pool
from .queue import Job, JobQueue
from .worker import BaseWorker, ErrorHandler, JobWorker, WorkerFactory

__all__ = [
    "JobPool",
    "small_pool",
    "medium_pool",
    "large_pool",
    "JobPoolFactory",
    "Job",
    "JobQueue",
    "OutstandingCounter",
    "BaseWorker",
    "JobWorker",
    "WorkerFactory",
    "ErrorHandler",
]
