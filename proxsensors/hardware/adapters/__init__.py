"""
External Data Adapters
======================
Sources for the raw sensor text and the host metadata strings.
"""

from .base_adapter import ISensorTextSource
from .host_metadata import HostMetadataReader
from .sensors_command import CommandSensorSource, FileSensorSource

__all__ = [
    "CommandSensorSource",
    "FileSensorSource",
    "HostMetadataReader",
    "ISensorTextSource",
]
