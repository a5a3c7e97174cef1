"""Base event model."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class BaseEvent(BaseModel):
    """Immutable base for all events.

    Every event carries a UTC timestamp of when it occurred and an
    event_type string matching the name it is emitted under.
    """

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)",
    )
    event_type: str = Field(default="base", description="Event type identifier")
