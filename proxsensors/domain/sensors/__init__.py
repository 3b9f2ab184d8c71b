"""
Domain Layer for Sensor Readings
================================
Value objects describing what one extraction pass produces.
"""

from proxsensors.domain.sensors.reading import (
    UNAVAILABLE_TEXT,
    CanonicalReading,
    DeviceBlock,
    NamedReading,
    RawReading,
    SensorValue,
    composite_key,
    sanitize_id,
)

__all__ = [
    "UNAVAILABLE_TEXT",
    "CanonicalReading",
    "DeviceBlock",
    "NamedReading",
    "RawReading",
    "SensorValue",
    "composite_key",
    "sanitize_id",
]
