"""Tests for event models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from jobpool.events.models import (
    BaseEvent,
    ErrorInfo,
    JobCompletedEvent,
    JobFailedEvent,
    JobStartedEvent,
    JobSubmittedEvent,
    PoolClosedEvent,
    WorkerStartedEvent,
    WorkerStoppedEvent,
)


class TestBaseEvent:
    def test_occurred_at_defaults_to_utc(self) -> None:
        event = BaseEvent()

        assert event.occurred_at.tzinfo == timezone.utc

    def test_immutable(self) -> None:
        event = BaseEvent()

        with pytest.raises(ValidationError):
            event.occurred_at = datetime.now(timezone.utc)


class TestEventTypes:
    @pytest.mark.parametrize(
        ("event", "event_type"),
        [
            (JobSubmittedEvent(job_id=0, pool_name="p"), "job.submitted"),
            (JobStartedEvent(job_id=0, pool_name="p", worker_name="w"), "job.started"),
            (
                JobCompletedEvent(job_id=0, pool_name="p", worker_name="w"),
                "job.completed",
            ),
            (
                JobFailedEvent(
                    job_id=0,
                    pool_name="p",
                    worker_name="w",
                    error=ErrorInfo(exc_type="E", message="m"),
                ),
                "job.failed",
            ),
            (WorkerStartedEvent(pool_name="p", worker_name="w"), "worker.started"),
            (WorkerStoppedEvent(pool_name="p", worker_name="w"), "worker.stopped"),
            (PoolClosedEvent(pool_name="p"), "pool.closed"),
        ],
    )
    def test_event_type_matches_emitted_name(self, event, event_type) -> None:
        assert event.event_type == event_type


class TestValidation:
    def test_job_id_cannot_be_negative(self) -> None:
        with pytest.raises(ValidationError):
            JobSubmittedEvent(job_id=-1, pool_name="p")

    def test_duration_cannot_be_negative(self) -> None:
        with pytest.raises(ValidationError):
            JobCompletedEvent(job_id=1, pool_name="p", worker_name="w", duration_ms=-1)

    def test_failed_event_requires_error(self) -> None:
        with pytest.raises(ValidationError):
            JobFailedEvent(job_id=1, pool_name="p", worker_name="w")
