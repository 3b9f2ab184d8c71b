"""
Sensors Output Parser
=====================
Finite-state parser over classified lines of lm-sensors output.

States::

    NO_DEVICE --device header--> IN_DEVICE
    IN_DEVICE --blank line-----> NO_DEVICE
    IN_DEVICE --device header--> IN_DEVICE (new device)

Reading lines are accepted in either state; without a current device the
reading is attributed to the empty device id. Readings are emitted in
input order with their label normalized on the fly, since CPU core
renumbering depends on the live per-device counter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from proxsensors.domain.sensors import CanonicalReading, DeviceBlock, RawReading, SensorValue
from proxsensors.enums.sensors import LineKind, ParseState
from proxsensors.hardware.sensors.processors.label_normalizer import LabelNormalizer

from .line_classifier import ClassifiedLine, classify_line

logger = logging.getLogger(__name__)

UNKNOWN_DEVICE = ""


@dataclass
class ParseResult:
    """Everything one parse pass produced, in first-seen order."""

    readings: list[CanonicalReading] = field(default_factory=list)
    devices: dict[str, DeviceBlock] = field(default_factory=dict)
    adapters: dict[str, str] = field(default_factory=dict)
    line_count: int = 0
    skipped_lines: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.readings


class SensorsOutputParser:
    """
    Parses one snapshot of sensors output.

    A parser instance holds the state of a single pass; create a new one
    (or call :meth:`reset`) for every snapshot so nothing leaks between
    passes.
    """

    def __init__(self):
        self.normalizer = LabelNormalizer()
        self.state = ParseState.NO_DEVICE
        self.current_device: str | None = None
        self.current_adapter: str | None = None
        self.result = ParseResult()

    def reset(self) -> None:
        """Drop all per-pass state."""
        self.normalizer = LabelNormalizer()
        self.state = ParseState.NO_DEVICE
        self.current_device = None
        self.current_adapter = None
        self.result = ParseResult()

    def parse(self, text: str | None) -> ParseResult:
        """
        Parse a complete sensors output snapshot.

        Args:
            text: Raw multi-line output; None or empty yields no readings

        Returns:
            ParseResult with readings in input order
        """
        self.reset()
        if text:
            self.feed_lines(text.splitlines())
        logger.debug(
            "Parsed %s lines: %s readings from %s devices (%s lines skipped)",
            self.result.line_count,
            len(self.result.readings),
            len(self.result.devices),
            self.result.skipped_lines,
        )
        return self.result

    def feed_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)

    def feed(self, line: str) -> CanonicalReading | None:
        """
        Consume one line and advance the state machine.

        Returns:
            The reading emitted for this line, if any
        """
        self.result.line_count += 1
        classified = classify_line(line)

        if classified.kind is LineKind.BLANK:
            self._on_blank()
        elif classified.kind is LineKind.DEVICE_HEADER:
            self._on_device_header(classified)
        elif classified.kind is LineKind.ADAPTER:
            self._on_adapter(classified)
        elif classified.kind is LineKind.READING:
            return self._on_reading(classified)
        else:
            self.result.skipped_lines += 1
            logger.debug("Skipping unrecognized line %s: %r", self.result.line_count, classified.text)
        return None

    def _on_blank(self) -> None:
        self.state = ParseState.NO_DEVICE
        self.current_device = None
        self.current_adapter = None

    def _on_device_header(self, classified: ClassifiedLine) -> None:
        device = classified.device
        self.state = ParseState.IN_DEVICE
        self.current_device = device
        self.current_adapter = None
        self.normalizer.enter_device(device)
        self.result.devices.setdefault(device, DeviceBlock(device_id=device))

    def _on_adapter(self, classified: ClassifiedLine) -> None:
        if self.state is not ParseState.IN_DEVICE or not self.current_device:
            self.result.skipped_lines += 1
            logger.debug("Ignoring adapter line outside a device block: %r", classified.text)
            return
        self.current_adapter = classified.adapter
        self.result.adapters[self.current_device] = classified.adapter
        self.result.devices[self.current_device].adapter = classified.adapter

    def _on_reading(self, classified: ClassifiedLine) -> CanonicalReading:
        device = self.current_device or UNKNOWN_DEVICE
        raw = RawReading(
            device=device,
            label=classified.label,
            value=SensorValue.parse(classified.value),
            line=classified.text,
            line_number=self.result.line_count,
        )
        reading = CanonicalReading(raw=raw, label=self.normalizer.normalize(device, raw.label))
        self.result.readings.append(reading)
        block = self.result.devices.get(device)
        if block is None:
            block = self.result.devices[device] = DeviceBlock(device_id=device)
        block.readings.append(reading)
        return reading


def parse_sensors_output(text: str | None) -> ParseResult:
    """Parse one snapshot with a fresh parser."""
    return SensorsOutputParser().parse(text)
