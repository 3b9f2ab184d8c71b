"""
Sensor Enumerations
===================

Line categories produced by the classifier, parser states and the device
families the friendly-name resolver knows about.
"""

from enum import Enum


class LineKind(str, Enum):
    """
    Category of one line of `sensors` output.
    Used by: line_classifier, sensors_parser
    """

    BLANK = "blank"
    DEVICE_HEADER = "device_header"
    ADAPTER = "adapter"
    READING = "reading"
    UNRECOGNIZED = "unrecognized"

    def __str__(self) -> str:
        return self.value


class ParseState(str, Enum):
    """States of the sensors output parser."""

    NO_DEVICE = "no_device"
    IN_DEVICE = "in_device"

    def __str__(self) -> str:
        return self.value


class DeviceFamily(str, Enum):
    """
    Hardware families with dedicated naming rules.
    Used by: friendly_names
    """

    CPU = "cpu"
    NVME = "nvme"
    ACPI = "acpi"
    WIFI = "wifi"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class AvailabilityState(str, Enum):
    """Payloads published on the availability topic."""

    ONLINE = "online"
    OFFLINE = "offline"

    def __str__(self) -> str:
        return self.value
