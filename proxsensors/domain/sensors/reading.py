"""
Sensor Reading Value Objects
============================
Immutable value objects produced by one extraction pass.

RawReading        what the parser captured from a reading line
CanonicalReading  RawReading plus the normalized label and composite key
NamedReading      CanonicalReading plus the derived friendly name
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

UNAVAILABLE_TEXT = "N/A"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def composite_key(device: str, label: str) -> str:
    """Build the ``device:label`` key identifying a reading within one pass."""
    return f"{device}:{label}"


def sanitize_id(key: str) -> str:
    """Map every character outside ``[A-Za-z0-9]`` to ``_``."""
    return _NON_ALNUM.sub("_", key)


@dataclass(frozen=True)
class SensorValue:
    """
    Numeric reading or the distinguished "not available" value.

    The numeric text is kept exactly as it appeared in the source (minus a
    leading ``+``) so the published state never gains or loses digits.
    """

    text: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "SensorValue":
        raw = raw.strip()
        if raw == UNAVAILABLE_TEXT:
            return cls(None)
        if raw.startswith("+"):
            raw = raw[1:]
        return cls(raw)

    @property
    def available(self) -> bool:
        return self.text is not None

    def to_state(self) -> str:
        """String published in the aggregated state snapshot."""
        return self.text if self.available else UNAVAILABLE_TEXT

    def __str__(self) -> str:
        return self.to_state()


@dataclass(frozen=True)
class RawReading:
    """A reading exactly as captured from one line of sensors output."""

    device: str
    label: str
    value: SensorValue
    line: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class CanonicalReading:
    """Raw reading with its normalized label (CPU cores renumbered)."""

    raw: RawReading
    label: str

    @property
    def device(self) -> str:
        return self.raw.device

    @property
    def value(self) -> SensorValue:
        return self.raw.value

    @property
    def key(self) -> str:
        return composite_key(self.raw.device, self.label)

    @property
    def sanitized_id(self) -> str:
        return sanitize_id(self.key)


@dataclass(frozen=True)
class NamedReading:
    """Canonical reading with the display name shown in Home Assistant."""

    reading: CanonicalReading
    friendly_name: str

    @property
    def sanitized_id(self) -> str:
        return self.reading.sanitized_id

    @property
    def value(self) -> SensorValue:
        return self.reading.value


@dataclass
class DeviceBlock:
    """One device section of sensors output, in the order it was seen."""

    device_id: str
    adapter: str | None = None
    readings: list[CanonicalReading] = field(default_factory=list)
