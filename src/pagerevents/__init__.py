"""
pagerevents — trigger and resolve incidents through the PagerDuty Events API v2.

Usage:
    from pagerevents import EventManager, EventSeverity

    with EventManager("your-integration-key") as events:
        event_id = events.trigger(None, "disk full", "host-1", EventSeverity.WARNING)
        # re-trigger the same incident with a new summary
        events.trigger(event_id, "disk still full", "host-1", EventSeverity.CRITICAL)
        events.resolve(event_id)
"""

from pagerevents.errors import (
    EncodingError,
    PagerEventsError,
    TransportError,
    UnexpectedStatusError,
)
from pagerevents.events import EVENTS_API_URL, EventSeverity
from pagerevents.manager import AsyncEventManager, EventManager

__version__ = "0.1.0"

__all__ = [
    "AsyncEventManager",
    "EVENTS_API_URL",
    "EncodingError",
    "EventManager",
    "EventSeverity",
    "PagerEventsError",
    "TransportError",
    "UnexpectedStatusError",
]
