"""
Enums Module
============

Enumeration types shared by the parser, the name resolver and the
publishing services.
"""

from proxsensors.enums.sensors import AvailabilityState, DeviceFamily, LineKind, ParseState

__all__ = [
    "AvailabilityState",
    "DeviceFamily",
    "LineKind",
    "ParseState",
]
