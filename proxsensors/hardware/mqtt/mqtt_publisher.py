"""
    This module provides the MQTT publisher used to push discovery records
    and state snapshots to the broker. It includes methods for connecting,
    disconnecting and publishing, with logging and health bookkeeping for
    each operation. Failed publishes are recorded and reported, never
    retried.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

import paho.mqtt.client as mqtt

from proxsensors.domain.exceptions import PublishError
from proxsensors.hardware.mqtt.client_factory import create_mqtt_client
from proxsensors.utils.time import utc_now

_mqtt_logger = logging.getLogger("proxsensors.mqtt")


@dataclass
class HealthStatus:
    """
    Tracks the health status of the MQTT client connection.
    """

    is_connected: bool = False
    last_error: str | None = None
    last_error_time: datetime | None = None
    connection_attempts: int = 0
    successful_publishes: int = 0
    failed_publishes: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate publish success rate percentage"""
        total_publishes = self.successful_publishes + self.failed_publishes
        if total_publishes == 0:
            return 0.0
        return (self.successful_publishes / total_publishes) * 100

    def mark_connected(self):
        """Mark the client as successfully connected."""
        self.is_connected = True
        self.last_error = None
        self.last_error_time = None

    def mark_disconnected(self):
        """Mark the client as disconnected."""
        self.is_connected = False

    def record_error(self, error: Exception | str):
        """Record a connection or operation error."""
        self.last_error = str(error)
        self.last_error_time = utc_now()

    def record_publish_success(self):
        self.successful_publishes += 1

    def record_publish_failure(self):
        self.failed_publishes += 1

    def to_dict(self):
        """Return health status as a dictionary."""
        return {
            "is_connected": self.is_connected,
            "last_error": self.last_error,
            "last_error_time": self.last_error_time.isoformat() if self.last_error_time else None,
            "connection_attempts": self.connection_attempts,
            "successful_publishes": self.successful_publishes,
            "failed_publishes": self.failed_publishes,
            "publish_success_rate": round(self.success_rate, 2),
        }


class MQTTPublisher:
    """
    Publishes messages to an MQTT broker.

    Unlike a subscriber-side client this wrapper connects only when asked:
    :meth:`connect` raises :class:`PublishError` when the broker cannot be
    reached so the caller decides whether the run should abort.
    """

    def __init__(
        self,
        broker,
        port,
        client_id="",
        username="",
        password="",
        keepalive=60,
        publish_timeout=10.0,
    ):
        """
        Initializes the MQTT publisher.

        Args:
            broker (str): The MQTT broker address.
            port (int): The MQTT broker port.
            client_id (str, optional): The MQTT client ID. Defaults to "".
            username (str, optional): Broker username. Defaults to "".
            password (str, optional): Broker password. Defaults to "".
            keepalive (int, optional): Keepalive interval in seconds.
            publish_timeout (float, optional): Seconds to wait for QoS>0 acknowledgements.
        """
        self.broker = broker
        self.port = port
        self.client_id = client_id
        self.keepalive = keepalive
        self.publish_timeout = publish_timeout
        self.client = create_mqtt_client(client_id=client_id, username=username, password=password)
        self.connected = False
        self.health_status = HealthStatus()

    def set_will(self, topic, payload, qos=0, retain=True):
        """Register a last-will message; must be called before connect()."""
        self.client.will_set(topic, payload, qos=qos, retain=retain)

    def connect(self):
        """
        Connects to the MQTT broker and starts the network loop.

        Raises:
            PublishError: If the broker cannot be reached.
        """
        if self.connected:
            return
        self.health_status.connection_attempts += 1
        try:
            self.client.connect(self.broker, self.port, self.keepalive)
        except (OSError, ValueError) as e:
            self.health_status.record_error(e)
            _mqtt_logger.error("Error connecting to MQTT broker %s:%s: %s", self.broker, self.port, e)
            raise PublishError(
                f"Cannot connect to MQTT broker {self.broker}:{self.port}: {e}",
                detail={"broker": self.broker, "port": self.port},
            ) from e
        self.client.loop_start()  # Start the MQTT loop in a separate thread
        self.connected = True
        self.health_status.mark_connected()
        _mqtt_logger.info("Connected to MQTT broker %s:%s", self.broker, self.port)

    def disconnect(self):
        """
        Disconnects from the MQTT broker.
        """
        if not self.connected:
            return
        try:
            self.client.disconnect()
            self.client.loop_stop()
            _mqtt_logger.info("Disconnected from MQTT broker. Health: %s", self.health_status.to_dict())
        except Exception as e:
            _mqtt_logger.error("Error disconnecting from MQTT broker: %s", e)
            self.health_status.record_error(e)
        finally:
            self.connected = False
            self.health_status.mark_disconnected()

    def publish(self, topic, payload, qos=0, retain=False) -> bool:
        """
        Publishes a message to the MQTT broker.

        Args:
            topic (str): The MQTT topic to publish to.
            payload (str): The message payload.
            qos (int): Quality of service level.
            retain (bool): Whether the broker should retain the message.

        Returns:
            bool: True when the broker accepted the message.
        """
        if not self.connected:
            self.health_status.record_publish_failure()
            _mqtt_logger.warning("MQTT client not connected. Cannot publish to %s.", topic)
            return False
        try:
            msg_info = self.client.publish(topic, payload, qos=qos, retain=retain)
            if msg_info.rc != mqtt.MQTT_ERR_SUCCESS:
                self.health_status.record_publish_failure()
                self.health_status.record_error(f"rc={msg_info.rc}")
                _mqtt_logger.error("Failed to publish to %s. MQTT result code: %s", topic, msg_info.rc)
                return False
            if qos > 0 and self.publish_timeout:
                msg_info.wait_for_publish(timeout=self.publish_timeout)
                if not msg_info.is_published():
                    self.health_status.record_publish_failure()
                    self.health_status.record_error(f"publish to {topic} not acknowledged")
                    _mqtt_logger.error(
                        "Publish to %s not acknowledged within %ss", topic, self.publish_timeout
                    )
                    return False
        except (RuntimeError, ValueError, OSError) as e:
            self.health_status.record_publish_failure()
            self.health_status.record_error(e)
            _mqtt_logger.error("Error publishing to MQTT topic %s: %s", topic, e)
            return False

        self.health_status.record_publish_success()
        _mqtt_logger.debug("Published to %s: %s", topic, payload)
        return True

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()
        return False


class DryRunPublisher:
    """Logs every message instead of sending it. Used by ``--dry-run``."""

    def __init__(self):
        self.messages: list[tuple[str, str, int, bool]] = []
        self.health_status = HealthStatus(is_connected=True)

    def connect(self):
        _mqtt_logger.info("Dry run: not connecting to any broker")

    def disconnect(self):
        pass

    def set_will(self, topic, payload, qos=0, retain=True):
        _mqtt_logger.debug("Dry run: last will %s -> %s", topic, payload)

    def publish(self, topic, payload, qos=0, retain=False) -> bool:
        self.messages.append((topic, payload, qos, retain))
        self.health_status.record_publish_success()
        _mqtt_logger.info("Dry run publish %s (qos=%s): %s", topic, qos, payload)
        return True

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()
        return False
