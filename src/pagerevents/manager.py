"""
EventManager — trigger and resolve incidents through the Events API v2.

Both managers hold the integration key and one reusable HTTP client.
They build a JSON event, POST it to the enqueue endpoint and accept
only a 202 response. Nothing is retried; every failure is raised to
the caller as a PagerEventsError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from pagerevents.errors import EncodingError, TransportError, UnexpectedStatusError
from pagerevents.events import (
    EVENTS_API_URL,
    EventResponse,
    EventSeverity,
    ResolveEvent,
    TriggerEvent,
)

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


def _encode(event: TriggerEvent | ResolveEvent) -> str:
    try:
        return event.model_dump_json()
    except PydanticSerializationError as exc:
        raise EncodingError(f"failed to encode {event.event_action.value} event") from exc


def _check_response(resp: httpx.Response, dedup_key: str) -> None:
    """Raise unless the remote service accepted the event."""
    if resp.status_code != httpx.codes.ACCEPTED:
        logger.warning(
            "Event %s rejected with status %d", dedup_key, resp.status_code
        )
        raise UnexpectedStatusError(resp.status_code, resp.reason_phrase)

    try:
        body = EventResponse.model_validate_json(resp.content)
    except ValidationError:
        logger.debug("Event %s accepted with an unparseable body", dedup_key)
        return
    logger.debug("Event %s accepted: %s", body.dedup_key or dedup_key, body.message)


class EventManager:
    """Blocking client for triggering and resolving incidents."""

    endpoint: str = EVENTS_API_URL

    def __init__(
        self,
        integration_key: str,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._integration_key = integration_key
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def __enter__(self) -> EventManager:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this manager created it."""
        if self._owns_client:
            self._client.close()

    def trigger(
        self,
        event_id: str | None,
        summary: str,
        source: str,
        severity: EventSeverity,
    ) -> str:
        """
        Trigger an incident and return its dedup key.

        With ``event_id=None`` a new incident is opened under a generated
        key. Passing a key from an earlier trigger updates that incident.
        """
        event = TriggerEvent.build(
            self._integration_key, event_id, summary, source, severity
        )
        self._post(event)
        return event.dedup_key

    def resolve(self, event_id: str) -> None:
        """Resolve the incident identified by ``event_id``."""
        self._post(ResolveEvent.build(self._integration_key, event_id))

    def _post(self, event: TriggerEvent | ResolveEvent) -> None:
        body = _encode(event)
        logger.debug("Sending %s event %s", event.event_action.value, event.dedup_key)
        try:
            resp = self._client.post(self.endpoint, content=body, headers=_HEADERS)
        except httpx.HTTPError as exc:
            logger.warning("Event delivery failed for %s: %s", event.dedup_key, exc)
            raise TransportError(str(exc)) from exc
        _check_response(resp, event.dedup_key)


class AsyncEventManager:
    """Asyncio counterpart of EventManager built on httpx.AsyncClient."""

    endpoint: str = EVENTS_API_URL

    def __init__(
        self,
        integration_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._integration_key = integration_key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    async def __aenter__(self) -> AsyncEventManager:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def trigger(
        self,
        event_id: str | None,
        summary: str,
        source: str,
        severity: EventSeverity,
    ) -> str:
        """Trigger an incident and return its dedup key."""
        event = TriggerEvent.build(
            self._integration_key, event_id, summary, source, severity
        )
        await self._post(event)
        return event.dedup_key

    async def resolve(self, event_id: str) -> None:
        """Resolve the incident identified by ``event_id``."""
        await self._post(ResolveEvent.build(self._integration_key, event_id))

    async def _post(self, event: TriggerEvent | ResolveEvent) -> None:
        body = _encode(event)
        logger.debug("Sending %s event %s", event.event_action.value, event.dedup_key)
        try:
            resp = await self._client.post(
                self.endpoint, content=body, headers=_HEADERS
            )
        except httpx.HTTPError as exc:
            logger.warning("Event delivery failed for %s: %s", event.dedup_key, exc)
            raise TransportError(str(exc)) from exc
        _check_response(resp, event.dedup_key)
