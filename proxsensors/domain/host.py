"""
Host Metadata Value Object
==========================
Identity of the machine whose sensors are published. Every field always
holds a string; missing sources are replaced by a fallback when read.
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "unknown"
UNKNOWN_TITLE = "Unknown"


@dataclass(frozen=True)
class HostMetadata:
    """Machine metadata used for the Home Assistant device descriptor."""

    host_id: str = UNKNOWN
    hostname: str = UNKNOWN
    vendor: str = UNKNOWN_TITLE
    model: str = UNKNOWN_TITLE
    kernel_version: str = UNKNOWN
    serial: str = UNKNOWN_TITLE
    hardware_revision: str = UNKNOWN_TITLE
