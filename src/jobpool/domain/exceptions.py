"""Custom exceptions for the job pool."""


class JobPoolError(Exception):
    """Base exception for JobPool errors."""

    pass


class InvalidJobError(JobPoolError):
    """Raised when a submitted job is absent or not callable.

    Detected synchronously before any state is touched, so the caller can
    safely retry with a valid job.
    """

    pass


class PoolClosedError(JobPoolError):
    """Raised when a job is submitted to a pool that has been closed.

    Also raised to a submitter that was blocked on a full queue when the
    pool was closed underneath it. In both cases the job was not accepted.
    """

    pass


class PoolNotClosedError(JobPoolError):
    """Raised when joining workers of a pool that is still accepting work."""

    pass


class WaitCancelledError(JobPoolError):
    """Raised when a wait is released by its cancellation signal.

    This is not an execution failure: outstanding work keeps running and the
    caller may wait again.
    """

    def __init__(self, reason: str = "cancelled") -> None:
        self.reason = reason
        super().__init__(f"Wait cancelled: {reason}")


class WaitTimeoutError(WaitCancelledError):
    """Raised when a wait's timeout or deadline elapses first."""

    def __init__(self, reason: str = "deadline exceeded") -> None:
        super().__init__(reason)


class QueueError(JobPoolError):
    """Base exception for queue-related errors."""

    pass


class QueueClosedError(QueueError):
    """Raised by the job queue once it is closed.

    Consumers see it when the queue is closed and drained; producers see it
    when putting onto a closed queue.
    """

    pass


class CounterUnderflowError(JobPoolError):
    """Raised when the outstanding counter would drop below zero.

    Indicates a completion was recorded without a matching submission.
    """

    pass
