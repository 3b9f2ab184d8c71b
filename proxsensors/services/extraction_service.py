"""
Extraction Service
==================
Runs one extraction pass: raw sensors text in, ordered named readings and
the aggregated state mapping out.

Duplicate handling
------------------
Two readings can end up with the same sanitized id, either because a
device reports the same label twice or because two distinct composite
keys only differ in characters that sanitization maps to ``_``. In both
cases the state mapping keeps the LAST value seen, while the named
reading list (and therefore discovery) keeps every occurrence. Collisions
between distinct composite keys are logged as warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from proxsensors.domain.sensors import NamedReading
from proxsensors.hardware.sensors.parsing import ParseResult, SensorsOutputParser
from proxsensors.hardware.sensors.processors import resolve_friendly_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdCollision:
    """Two readings that map to one sanitized id."""

    sanitized_id: str
    previous_key: str
    key: str

    @property
    def same_key(self) -> bool:
        return self.previous_key == self.key


@dataclass
class ExtractionResult:
    """Outcome of one extraction pass."""

    readings: list[NamedReading] = field(default_factory=list)
    state: dict[str, str] = field(default_factory=dict)
    collisions: list[IdCollision] = field(default_factory=list)
    parse_result: ParseResult | None = None

    @property
    def is_empty(self) -> bool:
        return not self.readings


class ExtractionService:
    """
    Parses sensors output and names every reading.

    Stateless between calls: each :meth:`extract` uses a fresh parser.
    """

    def extract(self, text: str | None) -> ExtractionResult:
        """
        Run a full extraction pass.

        Args:
            text: Raw sensors output (None/empty yields an empty result)

        Returns:
            ExtractionResult with readings in first-seen order
        """
        parse_result = SensorsOutputParser().parse(text)
        result = ExtractionResult(parse_result=parse_result)
        keys_by_id: dict[str, str] = {}

        for reading in parse_result.readings:
            sanitized_id = reading.sanitized_id
            friendly_name = resolve_friendly_name(reading.device, sanitized_id, reading.label)
            result.readings.append(NamedReading(reading=reading, friendly_name=friendly_name))

            previous_key = keys_by_id.get(sanitized_id)
            if previous_key is not None:
                collision = IdCollision(sanitized_id, previous_key, reading.key)
                result.collisions.append(collision)
                if collision.same_key:
                    logger.info("Duplicate reading %s; keeping the last value", reading.key)
                else:
                    logger.warning(
                        "Sensor ids collide after sanitization: %r and %r both map to %s; keeping the last value",
                        previous_key,
                        reading.key,
                        sanitized_id,
                    )
            keys_by_id[sanitized_id] = reading.key
            result.state[sanitized_id] = reading.value.to_state()

        logger.info(
            "Extracted %s readings (%s unique ids) from %s devices",
            len(result.readings),
            len(result.state),
            len(parse_result.devices),
        )
        return result
