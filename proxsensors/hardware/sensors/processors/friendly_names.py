"""
Friendly Name Resolver
======================
Maps (device, sanitized id, canonical label) to the short display name
shown in Home Assistant.

Sensor driver naming is inconsistent across kernels and boards, so the
known conventions are encoded per device family. :func:`detect_family`
picks the family (first match wins, in the order below); when the
family's namer has no opinion the canonical label is used unchanged.

    CPU   coretemp-isa-NNNN     "CPU{socket+1} Pkg" / "CPU{socket+1} Core N"
    NVMe  nvme_pci_NNNN in id   "NVMe{NNNN//100} Comp" / "... Sensor N" / "NVMe{n}"
    ACPI  acpitz-acpi-0         "ACPI Temp"
    WiFi  iwlwifi_*             "WiFi Temp"
"""

from __future__ import annotations

from typing import Callable, Optional

from proxsensors.enums.sensors import DeviceFamily

from .device_families import (
    COMPOSITE_LABEL_PATTERN,
    CPU_SOCKET_PATTERN,
    NVME_ID_PATTERN,
    NVME_SENSOR_LABEL_PATTERN,
    PACKAGE_LABEL_PATTERN,
    detect_family,
    is_core_label,
)

ACPI_NAME = "ACPI Temp"
WIFI_NAME = "WiFi Temp"

Namer = Callable[[str, str, str], Optional[str]]


def _cpu_name(device: str, sanitized_id: str, label: str) -> str | None:
    socket_num = int(CPU_SOCKET_PATTERN.search(device).group(1), 10) + 1
    if PACKAGE_LABEL_PATTERN.search(label):
        return f"CPU{socket_num} Pkg"
    if is_core_label(label):
        # label was already renumbered to "Core N" during extraction
        return f"CPU{socket_num} {label}"
    return None


def _nvme_name(device: str, sanitized_id: str, label: str) -> str | None:
    nvme_num = int(NVME_ID_PATTERN.search(sanitized_id.lower()).group(1), 10) // 100
    if COMPOSITE_LABEL_PATTERN.search(label):
        return f"NVMe{nvme_num} Comp"
    if NVME_SENSOR_LABEL_PATTERN.match(label):
        return f"NVMe{nvme_num} {label}"
    return f"NVMe{nvme_num}"


FAMILY_NAMERS: dict[DeviceFamily, Namer] = {
    DeviceFamily.CPU: _cpu_name,
    DeviceFamily.NVME: _nvme_name,
    DeviceFamily.ACPI: lambda device, sanitized_id, label: ACPI_NAME,
    DeviceFamily.WIFI: lambda device, sanitized_id, label: WIFI_NAME,
}


def resolve_friendly_name(device: str, sanitized_id: str, label: str) -> str:
    """
    Derive the display name for one reading. Pure and deterministic.

    Args:
        device: Device id, e.g. ``coretemp-isa-0000`` (may be empty)
        sanitized_id: Sanitized composite key of the reading
        label: Canonical label (CPU cores already renumbered)

    Returns:
        Friendly name, or ``label`` when the family has no better name
    """
    namer = FAMILY_NAMERS.get(detect_family(device, sanitized_id))
    if namer is None:
        return label
    return namer(device, sanitized_id, label) or label
