"""
Base Sensor Text Source
=======================
Abstract interface for anything that supplies one snapshot of raw
lm-sensors text.
"""

from abc import ABC, abstractmethod


class ISensorTextSource(ABC):
    """
    Abstract interface for raw sensor text sources.

    Required Methods (must override):
        - read_text(): Return one snapshot of sensors output
        - describe(): Short identifier used in log messages
    """

    @abstractmethod
    def read_text(self) -> str:
        """
        Read one snapshot of sensors output.

        Returns:
            Raw multi-line text (may be empty)

        Raises:
            SensorSourceError: If the text cannot be acquired
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        pass
