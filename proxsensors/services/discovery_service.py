"""
Discovery Service
=================
Builds the topics and payloads published for one host.

Topic layout::

    {discovery_prefix}/sensor/{host_id}/{sanitized_id}/config   one per reading
    {state_topic_prefix}/{host_id}/telemetry                     aggregated state
    {state_topic_prefix}/{host_id}/status                        availability
"""

from __future__ import annotations

from proxsensors.domain.host import HostMetadata
from proxsensors.domain.sensors import NamedReading
from proxsensors.schemas.discovery import DeviceDescriptor, DiscoveryConfigPayload, StateSnapshot

TELEMETRY_SUFFIX = "telemetry"
STATUS_SUFFIX = "status"


class DiscoveryService:
    """Payload and topic construction for Home Assistant MQTT discovery."""

    def __init__(
        self,
        host: HostMetadata,
        discovery_prefix: str = "homeassistant",
        state_topic_prefix: str = "proxmox_sensors",
        suggested_area: str = "Proxmox",
    ):
        self.host = host
        self.discovery_prefix = discovery_prefix.rstrip("/")
        self.state_topic_prefix = state_topic_prefix.rstrip("/")
        self.suggested_area = suggested_area
        self.device = self._build_device_descriptor()

    @property
    def base_topic(self) -> str:
        return f"{self.state_topic_prefix}/{self.host.host_id}"

    @property
    def telemetry_topic(self) -> str:
        return f"{self.base_topic}/{TELEMETRY_SUFFIX}"

    @property
    def status_topic(self) -> str:
        return f"{self.base_topic}/{STATUS_SUFFIX}"

    def config_topic(self, sanitized_id: str) -> str:
        return f"{self.discovery_prefix}/sensor/{self.host.host_id}/{sanitized_id}/config"

    def unique_id(self, sanitized_id: str) -> str:
        return f"{self.host.host_id}_{sanitized_id}"

    def _build_device_descriptor(self) -> DeviceDescriptor:
        return DeviceDescriptor(
            identifiers=[self.host.host_id],
            name=self.host.hostname,
            suggested_area=self.suggested_area,
            sw_version=self.host.kernel_version,
            manufacturer=self.host.vendor,
            model=self.host.model,
            serial_number=self.host.serial,
            hw_version=self.host.hardware_revision,
        )

    def build_config(self, reading: NamedReading) -> DiscoveryConfigPayload:
        """Discovery config record for one named reading."""
        sanitized_id = reading.sanitized_id
        return DiscoveryConfigPayload(
            device=self.device,
            base_topic=self.base_topic,
            name=reading.friendly_name,
            unique_id=self.unique_id(sanitized_id),
            availability_topic=f"~/{STATUS_SUFFIX}",
            state_topic=f"~/{TELEMETRY_SUFFIX}",
            value_template=f"{{{{ value_json.{sanitized_id} }}}}",
        )

    def build_configs(self, readings: list[NamedReading]) -> list[tuple[str, DiscoveryConfigPayload]]:
        """One (topic, payload) pair per reading occurrence, in order."""
        return [(self.config_topic(r.sanitized_id), self.build_config(r)) for r in readings]

    def build_state(self, state: dict[str, str]) -> StateSnapshot:
        return StateSnapshot(dict(state))
