"""
MQTT Transport
==============
paho-mqtt client construction and the publisher used by the services.
"""

from .client_factory import create_mqtt_client
from .mqtt_publisher import DryRunPublisher, HealthStatus, MQTTPublisher

__all__ = [
    "DryRunPublisher",
    "HealthStatus",
    "MQTTPublisher",
    "create_mqtt_client",
]
