"""
Event documents — the JSON bodies exchanged with the Events API v2.

Defines severity levels, the trigger and resolve request models, and the
response model the remote service returns on acceptance.
"""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

EVENTS_API_URL = "https://events.pagerduty.com/v2/enqueue"


class EventSeverity(str, Enum):
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class EventAction(str, Enum):
    TRIGGER = "trigger"
    RESOLVE = "resolve"


def new_dedup_key() -> str:
    """Generate a fresh dedup key (random UUID, hyphenated)."""
    return str(uuid.uuid4())


class EventLink(BaseModel):
    """A link attached to a triggered incident."""

    href: str
    text: str


class TriggerPayload(BaseModel):
    summary: str
    source: str
    severity: EventSeverity


class TriggerEvent(BaseModel):
    """Request body that opens, or updates, an incident."""

    model_config = ConfigDict(frozen=True)

    event_action: EventAction = EventAction.TRIGGER
    routing_key: str
    dedup_key: str
    links: list[EventLink] = Field(default_factory=list)
    payload: TriggerPayload

    @classmethod
    def build(
        cls,
        routing_key: str,
        dedup_key: str | None,
        summary: str,
        source: str,
        severity: EventSeverity,
    ) -> TriggerEvent:
        """
        Build a trigger event.

        A new dedup key is generated when ``dedup_key`` is None; passing an
        existing key re-triggers that incident instead of opening a new one.
        """
        return cls(
            routing_key=routing_key,
            dedup_key=dedup_key if dedup_key is not None else new_dedup_key(),
            payload=TriggerPayload(
                summary=summary,
                source=source,
                severity=EventSeverity(severity),
            ),
        )


class ResolveEvent(BaseModel):
    """Request body that resolves an open incident."""

    model_config = ConfigDict(frozen=True)

    event_action: EventAction = EventAction.RESOLVE
    routing_key: str
    dedup_key: str

    @classmethod
    def build(cls, routing_key: str, dedup_key: str) -> ResolveEvent:
        return cls(routing_key=routing_key, dedup_key=dedup_key)


class EventResponse(BaseModel):
    """Body returned by the remote service for an accepted event."""

    status: str = ""
    message: str = ""
    dedup_key: str = ""
