import logging
import os
import threading
from unittest.mock import patch

import pytest
from conftest import SAMPLE_SENSORS_OUTPUT, DummyClient

from proxsensors.workers import publisher_cli
from proxsensors.workers.publisher_cli import EXIT_OK, EXIT_PUBLISH_ERROR, EXIT_USAGE, main, run_loop

CLIENT_FACTORY = "proxsensors.hardware.mqtt.mqtt_publisher.create_mqtt_client"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.startswith("PROXSENSORS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PROXSENSORS_LOG_FILE", "")
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def sensors_file(tmp_path):
    path = tmp_path / "sensors.txt"
    path.write_text(SAMPLE_SENSORS_OUTPUT, encoding="utf-8")
    return str(path)


class StoppingClient(DummyClient):
    """Sets ``stop_event`` once a pass has marked the host online."""

    def __init__(self, stop_event: threading.Event):
        super().__init__()
        self.stop_event = stop_event

    def publish(self, topic, payload=None, qos=0, retain=False):
        info = super().publish(topic, payload, qos=qos, retain=retain)
        if topic.endswith("/status") and payload == "online":
            self.stop_event.set()
        return info


def test_dry_run_once(sensors_file, caplog):
    caplog.set_level(logging.INFO)

    assert main(["--once", "--dry-run", "--input", sensors_file]) == EXIT_OK

    messages = [r.getMessage() for r in caplog.records if r.name == "proxsensors.mqtt"]
    assert any("Dry run publish" in m and "/telemetry" in m for m in messages)
    assert any(m.endswith(": online") for m in messages)


def test_one_shot_publishes_to_broker(sensors_file):
    client = DummyClient()
    with patch(CLIENT_FACTORY, return_value=client):
        assert main(["--input", sensors_file, "--host", "broker.lan", "--qos", "1"]) == EXIT_OK

    assert client.will is None
    assert not any(m.retain for m in client.published)
    assert client.published[-1].payload == "online"
    assert {m.qos for m in client.published} == {1}
    assert len(client.published) == 14


def test_unreachable_broker_exits_with_publish_error(sensors_file):
    with patch(CLIENT_FACTORY, return_value=DummyClient(connect_error=ConnectionRefusedError("refused"))):
        assert main(["--input", sensors_file]) == EXIT_PUBLISH_ERROR


def test_failed_publish_exits_with_publish_error(sensors_file):
    with patch(CLIENT_FACTORY, return_value=DummyClient(publish_rc=4)):
        assert main(["--input", sensors_file]) == EXIT_PUBLISH_ERROR


def test_invalid_environment_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setenv("PROXSENSORS_MQTT_QOS", "7")

    assert main(["--dry-run"]) == EXIT_USAGE
    assert "QoS" in capsys.readouterr().err


def test_invalid_flags_exit_with_usage_code():
    with pytest.raises(SystemExit) as exc_info:
        main(["--qos", "3"])
    assert exc_info.value.code == EXIT_USAGE

    with pytest.raises(SystemExit) as exc_info:
        main(["--once", "--interval", "5"])
    assert exc_info.value.code == EXIT_USAGE


def test_recurring_mode_sets_will_and_goes_offline(sensors_file):
    stop_event = threading.Event()
    client = StoppingClient(stop_event)

    with patch(CLIENT_FACTORY, return_value=client):
        result = main(["--interval", "60", "--input", sensors_file], stop_event=stop_event)

    assert result == EXIT_OK
    assert client.will.payload == "offline"
    assert client.will.retain
    assert client.will.topic.endswith("/status")
    assert client.published[-1].topic == client.will.topic
    assert client.published[-1].payload == "offline"
    status = [(m.payload, m.retain) for m in client.published if m.topic == client.will.topic]
    assert status == [("online", True), ("offline", True)]
    assert not any(m.retain for m in client.published if m.topic != client.will.topic)
    assert client.connected_to is None


def test_run_loop_stops_when_event_is_set():
    stop_event = threading.Event()
    calls = []

    class CountingService:
        def run_pass(self):
            calls.append(1)
            if len(calls) == 3:
                stop_event.set()

    run_loop(CountingService(), 0.001, stop_event)

    assert len(calls) == 3


def test_module_exposes_entry_point():
    assert callable(publisher_cli.main)
    parser = publisher_cli.build_parser()
    args = parser.parse_args(["--interval", "15", "--dry-run"])
    assert args.interval == 15.0
    assert args.dry_run


def test_unreadable_sensors_input_exits_with_error(tmp_path):
    client = DummyClient()
    with patch(CLIENT_FACTORY, return_value=client):
        result = main(["--once", "--input", str(tmp_path / "missing.txt")])

    assert result == EXIT_PUBLISH_ERROR
    assert [(m.topic.rsplit("/", 1)[-1], m.payload) for m in client.published] == [("status", "online")]


def test_missing_sensors_command_exits_with_error(monkeypatch):
    monkeypatch.setenv("PROXSENSORS_SENSORS_COMMAND", "definitely-not-an-lm-sensors-binary")

    with patch(CLIENT_FACTORY, return_value=DummyClient()):
        assert main(["--once"]) == EXIT_PUBLISH_ERROR
