"""Centralized exception hierarchy for proxsensors.

All errors raised by the adapters and services inherit from
:class:`ProxSensorsError` so the CLI can catch a single base class, yet
still match on specific subclasses where narrower handling is appropriate.

The parsing core never raises for input content: unrecognized lines are
skipped and missing values become the unavailable marker.

Hierarchy
---------
::

    ProxSensorsError (base)
    ├── ConfigurationError   (missing / invalid config)
    ├── SensorSourceError    (sensors command missing, failing or timing out)
    └── PublishError         (broker unreachable)
"""

from __future__ import annotations


class ProxSensorsError(Exception):
    """Base exception for all proxsensors errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ConfigurationError(ProxSensorsError):
    """Required configuration is missing or invalid."""


class SensorSourceError(ProxSensorsError):
    """The raw sensor text could not be acquired."""


class PublishError(ProxSensorsError):
    """The MQTT broker could not be reached."""
