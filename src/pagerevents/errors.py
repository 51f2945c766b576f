"""
Exceptions raised by the event managers.

Every failure surfaces as a PagerEventsError subclass so callers can
catch the whole family or a single kind.
"""

from __future__ import annotations


class PagerEventsError(Exception):
    """Base class for all errors raised by pagerevents."""


class TransportError(PagerEventsError):
    """The request could not be delivered (connection, TLS, timeout)."""


class EncodingError(PagerEventsError):
    """The outgoing event could not be serialized to JSON."""


class UnexpectedStatusError(PagerEventsError):
    """The remote service answered with a status other than 202 Accepted."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"invalid status code: {status_code} {reason}".rstrip())
