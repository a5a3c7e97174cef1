"""Job pool factory types for dependency injection."""

import typing as t

from .pool import JobPool


class JobPoolFactory(t.Protocol):
    """Factory protocol for creating job pool instances.

    Any callable matching this signature can serve as a pool factory,
    including the JobPool class itself, lambda functions, or custom factory
    functions.
    """

    def __call__(
        self,
        worker_count: int,
        queue_size: int,
        **kwargs: t.Any,
    ) -> JobPool:
        """Create a pool with the given sizing.

        Args:
            worker_count: Number of worker threads
            queue_size: Capacity of the pending job queue
            **kwargs: Additional optional parameters (e.g., name, emitter)

        Returns:
            A started JobPool
        """
        ...
