"""
Label Normalizer
================
Rewrites raw sensor labels into canonical labels while the parser walks a
device block.

CPU core sensors are renumbered into a contiguous 1-based sequence so the
names stay stable whatever indices the coretemp driver reports (they may
start at 0 or skip numbers). All other labels pass through unchanged.
"""

from __future__ import annotations

import logging

from .device_families import is_core_label, is_cpu_device

logger = logging.getLogger(__name__)


class LabelNormalizer:
    """
    Stateful per-pass label normalizer.

    The core counter is scoped to the device currently being parsed:
    :meth:`enter_device` resets it to 1 when a CPU-family device header is
    seen, and :meth:`normalize` consumes one number per core label.
    """

    def __init__(self):
        self.cpu_core_counter = 1

    def enter_device(self, device: str) -> None:
        """Called on every device-header transition."""
        if is_cpu_device(device):
            self.cpu_core_counter = 1

    def normalize(self, device: str | None, label: str) -> str:
        """
        Return the canonical label for a reading.

        Args:
            device: Device the reading belongs to (may be empty)
            label: Raw label captured from the reading line

        Returns:
            ``"Core N"`` for CPU core readings, otherwise the raw label
        """
        if is_cpu_device(device) and is_core_label(label):
            canonical = f"Core {self.cpu_core_counter}"
            self.cpu_core_counter += 1
            if canonical != label:
                logger.debug("Renumbered %s:%s -> %s", device, label, canonical)
            return canonical
        return label
