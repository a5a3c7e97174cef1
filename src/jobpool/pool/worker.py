"""Worker threads that consume and execute jobs from the shared queue."""

import threading
import time
import typing as t
from abc import ABC, abstractmethod

from ..domain.exceptions import QueueClosedError
from ..events import (
    BaseEmitter,
    ErrorInfo,
    JobCompletedEvent,
    JobFailedEvent,
    JobStartedEvent,
    NullEmitter,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)
from ..infrastructure.logging import get_logger
from .counter import OutstandingCounter
from .queue import Job, JobQueue

if t.TYPE_CHECKING:
    import loguru

ErrorHandler = t.Callable[[int, Exception], None]


class BaseWorker(ABC):
    """Interface the pool relies on to run and supervise a worker."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def is_alive(self) -> bool:
        pass

    @abstractmethod
    def start(self) -> None:
        """Begin consuming the queue on a background thread."""
        pass

    @abstractmethod
    def join(self, timeout: float | None = None) -> None:
        """Wait for the worker to exit."""
        pass


class WorkerFactory(t.Protocol):
    """Factory protocol for creating workers.

    The JobWorker class itself satisfies this protocol.
    """

    def __call__(
        self,
        queue: JobQueue,
        counter: OutstandingCounter,
        *,
        name: str,
        pool_name: str,
        logger: "loguru.Logger",
        emitter: BaseEmitter,
        error_handler: ErrorHandler | None = None,
    ) -> BaseWorker: ...


class JobWorker(BaseWorker):
    """Runs jobs from a JobQueue one at a time on a dedicated daemon thread.

    The worker loops until the queue is closed and drained. Each job runs to
    completion on this thread; there is no preemption or per-job timeout.
    Exactly one counter decrement follows every job taken from the queue,
    whether the job returned or raised.

    A job raising an Exception is logged, emitted as job.failed and passed to
    error_handler, and the worker carries on with the next job. A
    BaseException that is not an Exception (SystemExit, KeyboardInterrupt)
    still gets its decrement but then ends the worker thread.
    """

    def __init__(
        self,
        queue: JobQueue,
        counter: OutstandingCounter,
        *,
        name: str,
        pool_name: str = "jobpool",
        logger: t.Optional["loguru.Logger"] = None,
        emitter: BaseEmitter | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self._queue = queue
        self._counter = counter
        self._name = name
        self._pool_name = pool_name
        self._logger = logger or get_logger(__name__)
        self._emitter = emitter or NullEmitter()
        self._error_handler = error_handler
        self._jobs_executed = 0
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    @property
    def jobs_executed(self) -> int:
        """Jobs this worker has taken off the queue and finished."""
        return self._jobs_executed

    def start(self) -> None:
        self._thread.start()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        self._logger.debug(f"Worker {self._name} started")
        self._emitter.emit(
            "worker.started",
            WorkerStartedEvent(pool_name=self._pool_name, worker_name=self._name),
        )
        try:
            while True:
                try:
                    job_id, job = self._queue.get()
                except QueueClosedError:
                    break
                try:
                    self._execute(job_id, job)
                finally:
                    self._jobs_executed += 1
                    self._counter.decrement()
        finally:
            self._logger.debug(
                f"Worker {self._name} stopped after {self._jobs_executed} jobs"
            )
            self._emitter.emit(
                "worker.stopped",
                WorkerStoppedEvent(
                    pool_name=self._pool_name,
                    worker_name=self._name,
                    jobs_executed=self._jobs_executed,
                ),
            )

    def _execute(self, job_id: int, job: Job) -> None:
        self._emitter.emit(
            "job.started",
            JobStartedEvent(
                job_id=job_id, pool_name=self._pool_name, worker_name=self._name
            ),
        )
        started = time.perf_counter()
        try:
            job()
        except Exception as exc:
            duration_ms = (time.perf_counter() - started) * 1000
            self._logger.error(
                f"Job {job_id} failed on {self._name}: {type(exc).__name__}: {exc}"
            )
            self._emitter.emit(
                "job.failed",
                JobFailedEvent(
                    job_id=job_id,
                    pool_name=self._pool_name,
                    worker_name=self._name,
                    duration_ms=duration_ms,
                    error=ErrorInfo.from_exception(exc, include_traceback=True),
                ),
            )
            self._handle_error(job_id, exc)
        except BaseException as exc:
            self._logger.critical(
                f"Job {job_id} raised {type(exc).__name__}; worker {self._name} exiting"
            )
            raise
        else:
            duration_ms = (time.perf_counter() - started) * 1000
            self._emitter.emit(
                "job.completed",
                JobCompletedEvent(
                    job_id=job_id,
                    pool_name=self._pool_name,
                    worker_name=self._name,
                    duration_ms=duration_ms,
                ),
            )

    def _handle_error(self, job_id: int, exc: Exception) -> None:
        if self._error_handler is None:
            return
        try:
            self._error_handler(job_id, exc)
        except Exception as handler_exc:
            self._logger.error(
                f"Error handler failed for job {job_id}: "
                f"{type(handler_exc).__name__}: {handler_exc}"
            )
