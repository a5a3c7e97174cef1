"""Application wiring."""

import typing as t
from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging
from .pool import JobPool, JobPoolFactory


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds references to cross-cutting concerns (currently only `Settings`)
    and builds pools sized from them, so tests can set everything up by
    passing explicit `Settings`.
    """

    settings: Settings

    def create_pool(
        self, pool_factory: JobPoolFactory = JobPool, **kwargs: t.Any
    ) -> JobPool:
        """Create a pool using the configured worker count and queue size."""
        return pool_factory(
            self.settings.worker_count, self.settings.queue_size, **kwargs
        )


def create_app(settings: Settings | None = None) -> App:
    """Configure logging and create an `App` with provided settings or defaults."""
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
