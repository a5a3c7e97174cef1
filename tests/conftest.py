"""Pytest configuration and fixtures for jobpool tests."""

import threading
import typing as t

import loguru
import pytest

from jobpool.app import create_app
from jobpool.config.settings import Environment, LogLevel, Settings
from jobpool.events import BaseEmitter, EventEmitter
from jobpool.infrastructure.logging import reset_logging
from jobpool.pool import JobPool

# Upper bound for any blocking call in a test, so a regression fails
# instead of hanging the suite.
WAIT_TIMEOUT = 5.0


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        worker_count=2,
        queue_size=4,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing event emission."""
    emitter = mocker.Mock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that subscribe handlers."""
    return EventEmitter(mock_logger)


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def make_pool(mock_logger) -> t.Iterator[t.Callable[..., JobPool]]:
    """Factory fixture creating pools that are closed and joined on teardown."""
    pools: list[JobPool] = []

    def _make_pool(worker_count: int = 2, queue_size: int = 4, **kwargs) -> JobPool:
        kwargs.setdefault("logger", mock_logger)
        pool = JobPool(worker_count, queue_size, **kwargs)
        pools.append(pool)
        return pool

    yield _make_pool

    for pool in pools:
        pool.close()
        pool.join(timeout=WAIT_TIMEOUT)


@pytest.fixture
def gate() -> t.Iterator[threading.Event]:
    """Event that gated jobs block on. Always opened on teardown."""
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def make_gated_job(gate):
    """Factory for jobs that signal when started, then block until gate opens."""

    def _make_gated_job(started: threading.Semaphore | None = None):
        def job():
            if started is not None:
                started.release()
            gate.wait(WAIT_TIMEOUT)

        return job

    return _make_gated_job


class Recorder:
    """Thread-safe collector used as a job body or event handler."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.items: list[t.Any] = []

    def add(self, item: t.Any) -> None:
        with self._lock:
            self.items.append(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self.items)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
