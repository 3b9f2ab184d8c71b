"""
Host Metadata Reader
====================
Collects machine identity for the Home Assistant device descriptor.

Sources (Linux)::

    host id            /etc/machine-id
    hostname           socket.gethostname()
    vendor             /sys/class/dmi/id/sys_vendor
    model              /sys/class/dmi/id/product_name
    kernel version     platform.release()
    serial             /sys/class/dmi/id/product_serial, else the machine id
    hardware revision  /sys/class/dmi/id/board_version

Nothing here raises: an unreadable or empty source yields its fallback.
"""

from __future__ import annotations

import logging
import platform
import socket
from pathlib import Path

from proxsensors.domain.host import UNKNOWN, UNKNOWN_TITLE, HostMetadata

logger = logging.getLogger(__name__)

MACHINE_ID_PATH = "etc/machine-id"
DMI_DIR = "sys/class/dmi/id"


class HostMetadataReader:
    """
    Reads host metadata from the filesystem.

    Args:
        root: Filesystem root the well-known paths are resolved against.
            Tests point this at a temporary directory.
    """

    def __init__(self, root: str | Path = "/"):
        self.root = Path(root)

    def _read_file(self, relative: str) -> str | None:
        path = self.root / relative
        try:
            value = path.read_text(encoding="utf-8", errors="replace").strip()
        except OSError as e:
            logger.debug("Metadata source %s unavailable: %s", path, e)
            return None
        return value or None

    def _read_dmi(self, name: str) -> str | None:
        return self._read_file(f"{DMI_DIR}/{name}")

    def machine_id(self) -> str | None:
        return self._read_file(MACHINE_ID_PATH)

    def hostname(self) -> str | None:
        try:
            return socket.gethostname() or None
        except OSError as e:
            logger.debug("Hostname unavailable: %s", e)
            return None

    def kernel_version(self) -> str | None:
        return platform.release() or None

    def read(self) -> HostMetadata:
        """Collect every metadata field, substituting fallbacks."""
        machine_id = self.machine_id()
        metadata = HostMetadata(
            host_id=machine_id or UNKNOWN,
            hostname=self.hostname() or UNKNOWN,
            vendor=self._read_dmi("sys_vendor") or UNKNOWN_TITLE,
            model=self._read_dmi("product_name") or UNKNOWN_TITLE,
            kernel_version=self.kernel_version() or UNKNOWN,
            serial=self._read_dmi("product_serial") or machine_id or UNKNOWN_TITLE,
            hardware_revision=self._read_dmi("board_version") or UNKNOWN_TITLE,
        )
        logger.debug("Host metadata: %s", metadata)
        return metadata
