"""Synchronized count of accepted-but-unfinished jobs."""

import threading
import time

from ..cancellation import CancellationToken
from ..domain.exceptions import CounterUnderflowError, WaitTimeoutError


class OutstandingCounter:
    """Counter with a blocking, cancellable wait-for-zero.

    Submitters increment, workers decrement, waiters block until the value
    reaches zero. All three go through one Condition, so an increment can
    never be lost against a concurrent decrement and a waiter can never miss
    the transition to zero.
    """

    def __init__(self) -> None:
        # Reentrant: a token deadline may run wake callbacks while this is held.
        self._cond = threading.Condition(threading.RLock())
        self._value = 0

    @property
    def value(self) -> int:
        with self._cond:
            return self._value

    def increment(self) -> int:
        """Record one more outstanding job. Returns the new value."""
        with self._cond:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        """Record one finished job. Returns the new value.

        Raises:
            CounterUnderflowError: If the counter is already zero
        """
        with self._cond:
            if self._value == 0:
                raise CounterUnderflowError("Outstanding job counter cannot go negative")
            self._value -= 1
            if self._value == 0:
                self._cond.notify_all()
            return self._value

    def wait_for_zero(
        self,
        cancel: CancellationToken | None = None,
        timeout: float | None = None,
    ) -> None:
        """Block until the value is zero.

        Reaching zero wins over a cancellation that is observed at the same
        time. Neither cancellation nor timeout modifies the counter.

        Args:
            cancel: Optional token that releases the wait early when fired
            timeout: Optional upper bound on the wait, in seconds

        Raises:
            WaitCancelledError: If cancel fired first
            WaitTimeoutError: If timeout elapsed, or cancel's deadline passed
        """
        deadline = None if timeout is None else time.monotonic() + timeout

        if cancel is not None:
            cancel.add_callback(self._wake_waiters)
        try:
            with self._cond:
                while self._value != 0:
                    if cancel is not None:
                        cancel.raise_if_cancelled()
                    bounds = []
                    if deadline is not None:
                        remaining = deadline - time.monotonic()
                        if remaining <= 0:
                            raise WaitTimeoutError()
                        bounds.append(remaining)
                    # Token deadlines fire lazily, so wake up in time to see them.
                    token_remaining = None if cancel is None else cancel.remaining()
                    if token_remaining is not None:
                        bounds.append(token_remaining)
                    self._cond.wait(min(bounds) if bounds else None)
        finally:
            if cancel is not None:
                cancel.remove_callback(self._wake_waiters)

    def _wake_waiters(self) -> None:
        with self._cond:
            self._cond.notify_all()
