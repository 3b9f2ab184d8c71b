"""
Discovery Schemas
=================

Pydantic models for Home Assistant MQTT discovery payloads. Field names
are Pythonic; aliases carry the abbreviated keys Home Assistant expects,
so always dump with ``by_alias=True`` (see :meth:`to_json`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel

CELSIUS = "°C"
DIAGNOSTIC = "diagnostic"


class DeviceDescriptor(BaseModel):
    """The ``dev`` block shared by every sensor of one host."""

    identifiers: list[str] = Field(..., alias="ids")
    name: str
    suggested_area: str = Field("Proxmox", alias="sa")
    sw_version: str = Field(..., alias="sw")
    manufacturer: str = Field(..., alias="mf")
    model: str | None = Field(None, alias="mdl")
    serial_number: str | None = Field(None, alias="sn")
    hw_version: str | None = Field(None, alias="hw")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DiscoveryConfigPayload(BaseModel):
    """Config record published once per reading on the discovery topic."""

    device: DeviceDescriptor = Field(..., alias="dev")
    base_topic: str = Field(..., alias="~")
    name: str
    unique_id: str = Field(..., alias="uniq_id")
    availability_topic: str = Field("~/status", alias="avty_t")
    state_topic: str = Field("~/telemetry", alias="stat_t")
    value_template: str
    entity_category: str = DIAGNOSTIC
    unit_of_measurement: str = Field(CELSIUS, alias="unit_of_meas")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "dev": {
                    "ids": ["4f2c0e7d"],
                    "name": "pve",
                    "sa": "Proxmox",
                    "sw": "6.8.12-4-pve",
                    "mf": "Supermicro",
                },
                "~": "proxmox_sensors/4f2c0e7d",
                "name": "CPU1 Core 1",
                "uniq_id": "4f2c0e7d_coretemp_isa_0000_Core_1",
                "avty_t": "~/status",
                "stat_t": "~/telemetry",
                "value_template": "{{ value_json.coretemp_isa_0000_Core_1 }}",
                "entity_category": "diagnostic",
                "unit_of_meas": "°C",
            }
        },
    )

    def to_json(self) -> str:
        """Compact one-line JSON keyed by the abbreviations, with ``°C`` kept verbatim."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class StateSnapshot(RootModel[dict[str, str]]):
    """Aggregated state: sanitized id -> value text (or ``N/A``)."""

    def to_json(self) -> str:
        return self.model_dump_json()
