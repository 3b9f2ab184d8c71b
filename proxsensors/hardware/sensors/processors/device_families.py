"""
Device Family Patterns
======================
Patterns recognising the hardware families that get dedicated labels and
names. Matching is substring based (``re.search``) unless anchored.
"""

from __future__ import annotations

import re

from proxsensors.enums.sensors import DeviceFamily

# coretemp-isa-0000, coretemp-isa-0001, ... one device per CPU socket
CPU_DEVICE_PATTERN = re.compile(r"coretemp-isa-[0-9A-Fa-f]{4}")
CPU_SOCKET_PATTERN = re.compile(r"coretemp-isa-(\d{4})")

# Matched against the lower-cased sanitized id, e.g. nvme_pci_0200_composite
NVME_ID_PATTERN = re.compile(r"nvme_pci_(\d{4})")

ACPI_DEVICE_PATTERN = re.compile(r"acpitz-acpi-0")
WIFI_DEVICE_PATTERN = re.compile(r"^iwlwifi_")

CORE_LABEL_PATTERN = re.compile(r"^core", re.IGNORECASE)
PACKAGE_LABEL_PATTERN = re.compile(r"package", re.IGNORECASE)
COMPOSITE_LABEL_PATTERN = re.compile(r"composite", re.IGNORECASE)
NVME_SENSOR_LABEL_PATTERN = re.compile(r"^sensor", re.IGNORECASE)


def is_cpu_device(device: str | None) -> bool:
    """True when the device id belongs to a CPU package thermal driver."""
    return bool(device) and CPU_DEVICE_PATTERN.search(device) is not None


def is_core_label(label: str) -> bool:
    return CORE_LABEL_PATTERN.match(label) is not None


def detect_family(device: str, sanitized_id: str) -> DeviceFamily:
    """
    Classify a reading into the first family whose pattern matches.

    Order: CPU, NVMe, ACPI, WiFi. The CPU family requires a decimal socket
    code so its friendly name can be numbered.
    """
    if CPU_SOCKET_PATTERN.search(device):
        return DeviceFamily.CPU
    if NVME_ID_PATTERN.search(sanitized_id.lower()):
        return DeviceFamily.NVME
    if ACPI_DEVICE_PATTERN.search(device):
        return DeviceFamily.ACPI
    if WIFI_DEVICE_PATTERN.search(device):
        return DeviceFamily.WIFI
    return DeviceFamily.OTHER
