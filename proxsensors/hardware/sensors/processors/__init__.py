"""
Label Processors
================
Per-reading transformations applied after a line has been parsed.

- LabelNormalizer: renumbers CPU core labels while a device block is parsed
- resolve_friendly_name: per-family rules producing display names
- device_families: shared family patterns
"""

from .device_families import detect_family, is_core_label, is_cpu_device
from .friendly_names import ACPI_NAME, FAMILY_NAMERS, WIFI_NAME, resolve_friendly_name
from .label_normalizer import LabelNormalizer

__all__ = [
    "ACPI_NAME",
    "FAMILY_NAMERS",
    "WIFI_NAME",
    "LabelNormalizer",
    "detect_family",
    "is_core_label",
    "is_cpu_device",
    "resolve_friendly_name",
]
