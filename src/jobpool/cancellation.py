"""Cooperative cancellation signal for waiting operations."""

import threading
import time
import typing as t

from .domain.exceptions import WaitCancelledError, WaitTimeoutError
from .infrastructure.logging import get_logger

DEFAULT_REASON = "cancelled"
DEADLINE_EXCEEDED = "deadline exceeded"

Callback = t.Callable[[], None]


class CancellationToken:
    """A one-shot signal that releases waiters early.

    A token is fired once, either explicitly via cancel() or when a deadline
    created with with_timeout() passes. The first reason recorded wins;
    later cancel() calls are no-ops.

    Deadlines are checked lazily: no thread is started per token. The token
    fires with DEADLINE_EXCEEDED the first time anything inspects it after
    the deadline (cancelled, reason, wait(), raise_if_cancelled(),
    add_callback()). Waiters bound their own sleeps by remaining(), so a
    deadline still releases them on time.

    Tokens only ever affect the operation waiting on them. Firing a token
    never aborts running jobs or touches pool state.

    Usage:
        token = CancellationToken.with_timeout(5.0)
        try:
            pool.wait_until_done(token)
        except WaitTimeoutError:
            ...
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._reason: str | None = None
        self._callbacks: list[Callback] = []
        self._deadline: float | None = None
        self._logger = get_logger(__name__)

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that fires with DEADLINE_EXCEEDED after seconds.

        A non-positive timeout yields a token that is already cancelled.
        """
        token = cls()
        token._deadline = time.monotonic() + seconds
        if seconds <= 0:
            token.cancel(DEADLINE_EXCEEDED)
        return token

    @property
    def cancelled(self) -> bool:
        self._expire_if_due()
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        """Why the token fired, or None while it is still live."""
        self._expire_if_due()
        return self._reason

    @property
    def deadline(self) -> float | None:
        """time.monotonic() value at which the token fires, if any."""
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds until the deadline, clamped at zero. None without a deadline."""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def cancel(self, reason: str = DEFAULT_REASON) -> bool:
        """Fire the token and run registered callbacks.

        Returns:
            True if this call fired the token, False if it was already fired.
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._reason = reason
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []

        for callback in callbacks:
            self._run_callback(callback)
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the token fires. Returns whether it fired."""
        remaining = self.remaining()
        if remaining is not None and (timeout is None or remaining <= timeout):
            self._event.wait(remaining)
            return self.cancelled
        return self._event.wait(timeout)

    def add_callback(self, callback: Callback) -> None:
        """Run callback once when the token fires.

        If the token has already fired the callback runs immediately on the
        calling thread.
        """
        self._expire_if_due()
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        self._run_callback(callback)

    def remove_callback(self, callback: Callback) -> None:
        """Forget a callback registered with add_callback(). Missing is fine."""
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    def raise_if_cancelled(self) -> None:
        """Raise the wait error matching this token's reason, if fired.

        Raises:
            WaitTimeoutError: If the token fired because its deadline passed
            WaitCancelledError: If the token was cancelled for any other reason
        """
        if not self.cancelled:
            return
        if self._reason == DEADLINE_EXCEEDED:
            raise WaitTimeoutError(DEADLINE_EXCEEDED)
        raise WaitCancelledError(self._reason or DEFAULT_REASON)

    def _expire_if_due(self) -> None:
        if (
            self._deadline is not None
            and not self._event.is_set()
            and time.monotonic() >= self._deadline
        ):
            self.cancel(DEADLINE_EXCEEDED)

    def _run_callback(self, callback: Callback) -> None:
        try:
            callback()
        except Exception as exc:
            self._logger.error(
                f"Cancellation callback {callback} failed: {type(exc).__name__}: {exc}"
            )
