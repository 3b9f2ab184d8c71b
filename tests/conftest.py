"""
Shared test fixtures for the proxsensors test suite.

Provides:
- A realistic multi-device `sensors` snapshot
- A dummy paho client that records publishes
- A fixed HostMetadata and a test AppConfig
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from proxsensors.config import AppConfig  # noqa: E402
from proxsensors.domain.host import HostMetadata  # noqa: E402

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.getLogger("proxsensors").setLevel(logging.DEBUG)

SAMPLE_SENSORS_OUTPUT = """\
coretemp-isa-0000
Adapter: ISA adapter
Package id 0:  +50.0°C  (high = +80.0°C, crit = +100.0°C)
Core 0:        +45.0°C  (high = +80.0°C, crit = +100.0°C)
Core 4:        +47.0°C  (high = +80.0°C, crit = +100.0°C)
Core 8:        +44.0°C  (high = +80.0°C, crit = +100.0°C)

coretemp-isa-0001
Adapter: ISA adapter
Package id 1:  +52.0°C  (high = +80.0°C, crit = +100.0°C)
Core 0:        +48.0°C  (high = +80.0°C, crit = +100.0°C)
Core 1:        +49.5°C  (high = +80.0°C, crit = +100.0°C)

nvme-pci-0200
Adapter: PCI adapter
Composite:    +38.9°C  (low  = -273.1°C, high = +81.8°C)
                       (crit = +84.8°C)
Sensor 1:     +38.9°C  (low  = -273.1°C, high = +65261.8°C)
Sensor 2:     +41.9°C  (low  = -273.1°C, high = +65261.8°C)

acpitz-acpi-0
Adapter: ACPI interface
temp1:            N/A  (crit = +105.0°C)

iwlwifi_1-virtual-0
Adapter: Virtual device
temp1:        +36.0°C
"""


class DummyMessageInfo:
    def __init__(self, rc: int = 0, published: bool = True):
        self.rc = rc
        self._published = published
        self.waited = False

    def wait_for_publish(self, timeout=None):
        self.waited = True

    def is_published(self):
        return self._published


class DummyClient:
    """Stand-in for paho.mqtt.client.Client that records every call."""

    def __init__(self, publish_rc: int = 0, acknowledged: bool = True, connect_error: Exception | None = None):
        self.publish_rc = publish_rc
        self.acknowledged = acknowledged
        self.connect_error = connect_error
        self.published: list[SimpleNamespace] = []
        self.will = None
        self.loop_running = False
        self.connected_to = None

    def connect(self, host, port=1883, keepalive=60):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected_to = (host, port, keepalive)
        return 0

    def loop_start(self):
        self.loop_running = True

    def loop_stop(self):
        self.loop_running = False

    def disconnect(self):
        self.connected_to = None
        return 0

    def will_set(self, topic, payload=None, qos=0, retain=False):
        self.will = SimpleNamespace(topic=topic, payload=payload, qos=qos, retain=retain)

    def publish(self, topic, payload=None, qos=0, retain=False):
        self.published.append(SimpleNamespace(topic=topic, payload=payload, qos=qos, retain=retain))
        return DummyMessageInfo(rc=self.publish_rc, published=self.acknowledged)


class RecordingPublisher:
    """MessagePublisher that keeps (topic, payload, qos) tuples."""

    def __init__(self, fail_topics: tuple[str, ...] = ()):
        self.messages: list[tuple[str, str, int]] = []
        self.retain_flags: list[bool] = []
        self.fail_topics = fail_topics

    def publish(self, topic, payload, qos=0, retain=False):
        self.messages.append((topic, payload, qos))
        self.retain_flags.append(retain)
        return not any(topic.endswith(suffix) for suffix in self.fail_topics)


class StaticMetadataReader:
    def __init__(self, host: HostMetadata):
        self.host = host
        self.reads = 0

    def read(self) -> HostMetadata:
        self.reads += 1
        return self.host


class StaticTextSource:
    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error

    def read_text(self) -> str:
        if self.error is not None:
            raise self.error
        return self.text

    def describe(self) -> str:
        return "static"


# ========================== Fixtures ==============================


@pytest.fixture()
def sample_output() -> str:
    return SAMPLE_SENSORS_OUTPUT


@pytest.fixture()
def host() -> HostMetadata:
    return HostMetadata(
        host_id="4f2c0e7d",
        hostname="pve",
        vendor="Supermicro",
        model="X11SPi-TF",
        kernel_version="6.8.12-4-pve",
        serial="S123456",
        hardware_revision="1.02",
    )


@pytest.fixture()
def app_config(monkeypatch) -> AppConfig:
    """AppConfig built from a clean environment."""
    for name in list(os.environ):
        if name.startswith("PROXSENSORS_"):
            monkeypatch.delenv(name, raising=False)
    return AppConfig()


@pytest.fixture()
def dummy_client() -> DummyClient:
    return DummyClient()


@pytest.fixture()
def recording_publisher() -> RecordingPublisher:
    return RecordingPublisher()
