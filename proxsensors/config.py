"""
Configuration for proxsensors
=============================
Runtime settings for the sensors publisher, loaded from environment
variables. CLI flags override individual fields after loading.
Setups the logging configuration as well.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler

from proxsensors.domain.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    # MQTT broker
    mqtt_broker_host: str = field(default_factory=lambda: os.getenv("PROXSENSORS_MQTT_HOST", "mqtt.local"))
    mqtt_broker_port: int = field(default_factory=lambda: _env_int("PROXSENSORS_MQTT_PORT", 1883))
    mqtt_username: str = field(default_factory=lambda: os.getenv("PROXSENSORS_MQTT_USER", ""))
    mqtt_password: str = field(default_factory=lambda: os.getenv("PROXSENSORS_MQTT_PASSWORD", ""), repr=False)
    mqtt_qos: int = field(default_factory=lambda: _env_int("PROXSENSORS_MQTT_QOS", 2))
    mqtt_client_id: str = field(default_factory=lambda: os.getenv("PROXSENSORS_MQTT_CLIENT_ID", ""))
    mqtt_keepalive: int = field(default_factory=lambda: _env_int("PROXSENSORS_MQTT_KEEPALIVE", 60))

    # Topics and Home Assistant device descriptor
    discovery_prefix: str = field(default_factory=lambda: os.getenv("PROXSENSORS_DISCOVERY_PREFIX", "homeassistant"))
    state_topic_prefix: str = field(default_factory=lambda: os.getenv("PROXSENSORS_STATE_PREFIX", "proxmox_sensors"))
    suggested_area: str = field(default_factory=lambda: os.getenv("PROXSENSORS_SUGGESTED_AREA", "Proxmox"))

    # Raw sensor text source
    sensors_command: str = field(default_factory=lambda: os.getenv("PROXSENSORS_SENSORS_COMMAND", "sensors"))
    sensors_timeout_seconds: float = field(default_factory=lambda: _env_float("PROXSENSORS_SENSORS_TIMEOUT", 10.0))

    # 0 publishes a single pass and exits
    publish_interval_seconds: float = field(default_factory=lambda: _env_float("PROXSENSORS_INTERVAL", 0.0))

    DEBUG: bool = field(default_factory=lambda: _env_bool("PROXSENSORS_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("PROXSENSORS_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("PROXSENSORS_LOG_FILE", "logs/proxsensors.log"))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.mqtt_qos not in (0, 1, 2):
            raise ConfigurationError(
                f"MQTT QoS must be 0, 1 or 2 (got {self.mqtt_qos}).",
                detail={"mqtt_qos": self.mqtt_qos},
            )
        if not 0 < self.mqtt_broker_port < 65536:
            raise ConfigurationError(
                f"MQTT port out of range: {self.mqtt_broker_port}",
                detail={"mqtt_broker_port": self.mqtt_broker_port},
            )
        if self.publish_interval_seconds < 0:
            raise ConfigurationError("Publish interval cannot be negative.")


def setup_logging(debug: bool = False, log_file: str | None = None, level: str | None = None) -> None:
    """Setup logging configuration."""
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    # Root logger
    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicates when setup_logging is called more than once
    has_console = any(getattr(h, "name", "") == "proxsensors_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "proxsensors_file" for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "proxsensors_console"
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "proxsensors_file"
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    # Ensure handler levels follow the desired log level
    for handler in root.handlers:
        if getattr(handler, "name", "") in {"proxsensors_console", "proxsensors_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))

    # paho logs every packet at DEBUG
    if not debug:
        logging.getLogger("paho").setLevel(logging.WARNING)


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    return AppConfig()
