"""
Schemas
=======

Pydantic models for the messages published to the broker.
"""

from proxsensors.schemas.discovery import DeviceDescriptor, DiscoveryConfigPayload, StateSnapshot

__all__ = [
    "DeviceDescriptor",
    "DiscoveryConfigPayload",
    "StateSnapshot",
]
