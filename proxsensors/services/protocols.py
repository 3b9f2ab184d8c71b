"""
Service protocols (structural typing interfaces).

Protocols let services declare the *minimal* surface they depend on
without importing the concrete class, making tests trivially mockable.

``MQTTPublisher`` and ``DryRunPublisher`` satisfy :class:`MessagePublisher`
via structural subtyping; no explicit inheritance needed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessagePublisher(Protocol):
    """Anything that can push a payload to a topic."""

    def publish(self, topic: str, payload: str, qos: int = 0, retain: bool = False) -> bool:
        """Send one message; return True when it was accepted."""
        ...
