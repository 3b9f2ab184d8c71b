"""
Sensor Publish Service
======================
Orchestrates one complete publish pass:

    read sensors text -> extract -> discovery configs -> state -> availability

Every pass is independent: host metadata is re-read and a fresh parser is
used each time, so nothing carries over between passes.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from proxsensors.domain.exceptions import SensorSourceError
from proxsensors.enums.sensors import AvailabilityState
from proxsensors.services.discovery_service import DiscoveryService
from proxsensors.services.extraction_service import ExtractionResult, ExtractionService
from proxsensors.utils.time import utc_now

if TYPE_CHECKING:
    from proxsensors.config import AppConfig
    from proxsensors.hardware.adapters import HostMetadataReader, ISensorTextSource
    from proxsensors.services.protocols import MessagePublisher

logger = logging.getLogger(__name__)


@dataclass
class PassReport:
    """Summary of one publish pass."""

    started_at: datetime
    readings: int = 0
    unique_ids: int = 0
    published: int = 0
    failed: int = 0
    source_error: str | None = None
    extraction: ExtractionResult | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.source_error is None and self.failed == 0

    def to_dict(self) -> dict:
        return {
            "started_at": self.started_at.isoformat(),
            "readings": self.readings,
            "unique_ids": self.unique_ids,
            "published": self.published,
            "failed": self.failed,
            "source_error": self.source_error,
        }


class SensorPublishService:
    """
    Publishes the host's sensor readings once per call to :meth:`run_pass`.

    Args:
        source: Supplies raw sensors text
        metadata_reader: Supplies host metadata
        publisher: Transport collaborator (MQTTPublisher, DryRunPublisher, ...)
        config: Topic prefixes, QoS and device descriptor settings
        retain_availability: Publish availability messages retained, matching
            a retained last will registered on the status topic
    """

    def __init__(
        self,
        source: "ISensorTextSource",
        metadata_reader: "HostMetadataReader",
        publisher: "MessagePublisher",
        config: "AppConfig",
        extraction_service: ExtractionService | None = None,
        retain_availability: bool = False,
    ):
        self.source = source
        self.metadata_reader = metadata_reader
        self.publisher = publisher
        self.config = config
        self.extraction_service = extraction_service or ExtractionService()
        self.retain_availability = retain_availability
        # overlapping passes are meaningless; serialize them
        self._pass_lock = threading.Lock()

    def build_discovery(self) -> DiscoveryService:
        return DiscoveryService(
            host=self.metadata_reader.read(),
            discovery_prefix=self.config.discovery_prefix,
            state_topic_prefix=self.config.state_topic_prefix,
            suggested_area=self.config.suggested_area,
        )

    def _publish(self, report: PassReport, topic: str, payload: str, retain: bool = False) -> None:
        if self.publisher.publish(topic, payload, qos=self.config.mqtt_qos, retain=retain):
            report.published += 1
        else:
            report.failed += 1

    def _publish_online(self, report: PassReport, discovery: DiscoveryService) -> None:
        self._publish(
            report, discovery.status_topic, AvailabilityState.ONLINE.value, retain=self.retain_availability
        )

    def run_pass(self) -> PassReport:
        """
        Run one extraction-and-publish pass.

        A failing sensor source is logged and reported; only the
        availability marker is published in that case.
        """
        with self._pass_lock:
            report = PassReport(started_at=utc_now())
            discovery = self.build_discovery()

            try:
                text = self.source.read_text()
            except SensorSourceError as e:
                logger.error("Could not read sensors from %s: %s", self.source.describe(), e)
                report.source_error = str(e)
                self._publish_online(report, discovery)
                logger.debug("Pass report: %s", report.to_dict())
                return report

            extraction = self.extraction_service.extract(text)
            report.extraction = extraction
            report.readings = len(extraction.readings)
            report.unique_ids = len(extraction.state)

            for topic, payload in discovery.build_configs(extraction.readings):
                self._publish(report, topic, payload.to_json())
                logger.debug("Config for %s published to %s", payload.name, topic)

            state = discovery.build_state(extraction.state)
            self._publish(report, discovery.telemetry_topic, state.to_json())
            self._publish_online(report, discovery)

            logger.debug("Pass report: %s", report.to_dict())
            if report.failed:
                logger.warning(
                    "Pass finished with %s failed publishes (%s succeeded)", report.failed, report.published
                )
            else:
                logger.info(
                    "Published %s sensor configs and state to %s", report.readings, discovery.telemetry_topic
                )
            return report

    def publish_offline(self) -> bool:
        """Mark the host unavailable, e.g. when a recurring publisher stops."""
        discovery = self.build_discovery()
        return self.publisher.publish(
            discovery.status_topic,
            AvailabilityState.OFFLINE.value,
            qos=self.config.mqtt_qos,
            retain=self.retain_availability,
        )
