"""Bounded worker pool with completion tracking."""

import itertools
import threading
import time
import typing as t

from ..cancellation import CancellationToken
from ..config.settings import Settings
from ..domain.config import LARGE, MEDIUM, SMALL, JobPoolConfig
from ..domain.exceptions import (
    InvalidJobError,
    PoolClosedError,
    PoolNotClosedError,
    QueueClosedError,
)
from ..events import BaseEmitter, JobSubmittedEvent, NullEmitter, PoolClosedEvent
from ..infrastructure.logging import get_logger
from .counter import OutstandingCounter
from .queue import Job, JobQueue
from .worker import BaseWorker, ErrorHandler, JobWorker, WorkerFactory

if t.TYPE_CHECKING:
    from types import TracebackType

    from loguru import Logger


class JobPool:
    """Fixed set of worker threads executing jobs from a bounded queue.

    Workers are started by the constructor and live until the pool is
    closed and its queue drained. Callers submit zero-argument callables and
    may later block until every accepted job has finished.

    Key guarantees:
    - outstanding equals the number of accepted jobs that have not finished
    - every accepted job runs exactly once, even if the pool is closed while
      it is still queued
    - worker count and queue capacity never change after construction

    Implementation decisions:
    - Submission blocks on a full queue rather than dropping or failing
    - submit() after close() raises PoolClosedError; a submitter blocked on
      a full queue when close() happens is released with the same error and
      its job is not accepted
    - close() is idempotent
    - A failing job is logged, emitted as job.failed and passed to
      error_handler; the worker survives and keeps consuming
    - worker_count <= 0 starts no workers: jobs are accepted but never run,
      so only a cancellable or timed wait ever returns
    - queue_size <= 0 buffers nothing: each submission is handed directly to
      an idle worker, blocking until one is free

    Usage:
        with JobPool(worker_count=4, queue_size=16) as pool:
            for item in items:
                pool.submit(lambda item=item: process(item))
            pool.wait_until_done(CancellationToken.with_timeout(30))
    """

    def __init__(
        self,
        worker_count: int,
        queue_size: int,
        *,
        name: str = "jobpool",
        logger: t.Optional["Logger"] = None,
        emitter: BaseEmitter | None = None,
        error_handler: ErrorHandler | None = None,
        worker_factory: WorkerFactory | None = None,
    ) -> None:
        """Create the pool and start its workers.

        Args:
            worker_count: Number of worker threads to start
            queue_size: Capacity of the pending job queue
            name: Pool name, used for worker thread names, logs and events
            logger: Logger instance. If None, a module logger is used.
            emitter: Emitter for job, worker and pool events. If None,
                    a NullEmitter is used (no events emitted).
            error_handler: Called as error_handler(job_id, exc) on the worker
                          thread when a job raises. Exceptions from the
                          handler are logged and discarded.
            worker_factory: Factory used to create each worker. Defaults to
                           JobWorker.
        """
        self._name = name
        self._worker_count = worker_count
        self._queue_size = queue_size
        self._logger = logger or get_logger(__name__)
        self._emitter = emitter or NullEmitter()
        self._queue = JobQueue(queue_size)
        self._counter = OutstandingCounter()
        self._job_ids = itertools.count()
        self._lock = threading.Lock()
        self._closed = False
        self._workers: list[BaseWorker] = []

        if worker_count <= 0:
            self._logger.warning(
                f"Pool {name} created with worker_count={worker_count}; "
                "submitted jobs will never run"
            )

        factory: WorkerFactory = worker_factory or JobWorker
        for index in range(max(worker_count, 0)):
            worker = factory(
                self._queue,
                self._counter,
                name=f"{name}-worker-{index + 1}",
                pool_name=name,
                logger=self._logger,
                emitter=self._emitter,
                error_handler=error_handler,
            )
            worker.start()
            self._workers.append(worker)

        self._logger.debug(
            f"Pool {name} started {len(self._workers)} workers "
            f"with queue size {queue_size}"
        )

    @classmethod
    def from_config(cls, config: JobPoolConfig, **kwargs: t.Any) -> "JobPool":
        """Create a pool from a JobPoolConfig. kwargs go to __init__."""
        kwargs.setdefault("name", config.name)
        return cls(config.worker_count, config.queue_size, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: t.Any) -> "JobPool":
        """Create a pool sized by application settings."""
        return cls(settings.worker_count, settings.queue_size, **kwargs)

    @property
    def name(self) -> str:
        return self._name

    @property
    def worker_count(self) -> int:
        return self._worker_count

    @property
    def queue_size(self) -> int:
        return self._queue_size

    @property
    def outstanding(self) -> int:
        """Jobs accepted by submit() that have not finished running."""
        return self._counter.value

    @property
    def pending_count(self) -> int:
        """Jobs sitting in the queue, not yet picked up by a worker."""
        return self._queue.qsize()

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def active_workers(self) -> tuple[BaseWorker, ...]:
        """Snapshot of workers whose threads are still running."""
        return tuple(worker for worker in self._workers if worker.is_alive)

    @property
    def emitter(self) -> BaseEmitter:
        """Emitter for job.*, worker.* and pool.* events."""
        return self._emitter

    def submit(self, job: Job) -> int:
        """Queue a job for execution, blocking while the queue is full.

        Args:
            job: Zero-argument callable. Its return value is ignored.

        Returns:
            The job id carried by this job's events.

        Raises:
            InvalidJobError: If job is None or not callable. Nothing is queued.
            PoolClosedError: If the pool is closed, or gets closed while this
                            call is blocked on a full queue. Nothing is queued.
        """
        if job is None:
            raise InvalidJobError("job cannot be None")
        if not callable(job):
            raise InvalidJobError(f"job must be callable, got {type(job).__name__}")
        if self._closed:
            raise PoolClosedError(f"Pool {self._name} is closed")

        with self._lock:
            job_id = next(self._job_ids)

        # Count before enqueueing so a fast worker can never decrement first.
        self._counter.increment()
        try:
            self._queue.put((job_id, job))
        except QueueClosedError as exc:
            self._counter.decrement()
            raise PoolClosedError(f"Pool {self._name} is closed") from exc

        # Workers may already be running the job, so job.started can be
        # observed before this event. The job is accepted at this point, so
        # an emitter failure must not reach the caller.
        try:
            self._emitter.emit(
                "job.submitted",
                JobSubmittedEvent(job_id=job_id, pool_name=self._name),
            )
        except Exception as exc:
            self._logger.error(
                f"Failed to emit job.submitted for job {job_id}: "
                f"{type(exc).__name__}: {exc}"
            )
        return job_id

    def wait_until_done(
        self,
        cancel: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> None:
        """Block until every accepted job has finished.

        With no arguments this waits indefinitely. Cancellation only releases
        this caller; queued and running jobs are unaffected and the call can
        be repeated. Any number of threads may wait at once.

        Args:
            cancel: Token that releases the wait early when fired
            timeout: Upper bound on the wait, in seconds

        Raises:
            WaitCancelledError: If cancel fired before the pool was idle.
                               The error's reason is the token's reason.
            WaitTimeoutError: If timeout elapsed or cancel's deadline passed
        """
        self._counter.wait_for_zero(cancel=cancel, timeout=timeout)

    def close(self) -> None:
        """Stop accepting jobs and let workers exit once the queue drains.

        Jobs already queued still run. Idempotent - safe to call multiple
        times; only the first call has any effect.
        """
        with self._lock:
            if self._closed:
                self._logger.debug(f"Pool {self._name} already closed")
                return
            self._closed = True

        self._queue.close()
        outstanding = self._counter.value
        self._logger.info(f"Pool {self._name} closed with {outstanding} jobs outstanding")
        self._emitter.emit(
            "pool.closed",
            PoolClosedEvent(pool_name=self._name, outstanding=outstanding),
        )

    def join(self, timeout: float | None = None) -> bool:
        """Wait for worker threads to exit after close().

        Args:
            timeout: Upper bound on the whole join, in seconds

        Returns:
            True if every worker has exited, False if the timeout elapsed first.

        Raises:
            PoolNotClosedError: If the pool is still open, since its workers
                               would never exit
        """
        if not self._closed:
            raise PoolNotClosedError(f"Pool {self._name} must be closed before join")

        deadline = None if timeout is None else time.monotonic() + timeout
        for worker in self._workers:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0)
            worker.join(remaining)
        return not self.active_workers

    def __enter__(self) -> "JobPool":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: "TracebackType | None",
    ) -> None:
        """Close the pool; on a clean exit also wait for all work to finish."""
        self.close()
        if exc_type is None:
            self.join()


def small_pool(**kwargs: t.Any) -> JobPool:
    """10 workers, 100 queue slots."""
    return JobPool.from_config(SMALL, **kwargs)


def medium_pool(**kwargs: t.Any) -> JobPool:
    """50 workers, 500 queue slots."""
    return JobPool.from_config(MEDIUM, **kwargs)


def large_pool(**kwargs: t.Any) -> JobPool:
    """100 workers, 1000 queue slots."""
    return JobPool.from_config(LARGE, **kwargs)
