import json

from proxsensors.services.discovery_service import DiscoveryService
from proxsensors.services.extraction_service import ExtractionService


def _named(text):
    return ExtractionService().extract(text).readings


def test_topics(host):
    service = DiscoveryService(host)

    assert service.base_topic == "proxmox_sensors/4f2c0e7d"
    assert service.telemetry_topic == "proxmox_sensors/4f2c0e7d/telemetry"
    assert service.status_topic == "proxmox_sensors/4f2c0e7d/status"
    assert service.config_topic("acpitz_acpi_0_temp1") == "homeassistant/sensor/4f2c0e7d/acpitz_acpi_0_temp1/config"


def test_custom_prefixes(host):
    service = DiscoveryService(host, discovery_prefix="ha/", state_topic_prefix="lab_sensors")

    assert service.config_topic("x") == "ha/sensor/4f2c0e7d/x/config"
    assert service.telemetry_topic == "lab_sensors/4f2c0e7d/telemetry"


def test_config_payload_uses_home_assistant_abbreviations(host):
    service = DiscoveryService(host)
    reading = _named("coretemp-isa-0000\nCore 0:  +45.0°C\n")[0]

    payload = json.loads(service.build_config(reading).to_json())

    assert payload == {
        "dev": {
            "ids": ["4f2c0e7d"],
            "name": "pve",
            "sa": "Proxmox",
            "sw": "6.8.12-4-pve",
            "mf": "Supermicro",
            "mdl": "X11SPi-TF",
            "sn": "S123456",
            "hw": "1.02",
        },
        "~": "proxmox_sensors/4f2c0e7d",
        "name": "CPU1 Core 1",
        "uniq_id": "4f2c0e7d_coretemp_isa_0000_Core_1",
        "avty_t": "~/status",
        "stat_t": "~/telemetry",
        "value_template": "{{ value_json.coretemp_isa_0000_Core_1 }}",
        "entity_category": "diagnostic",
        "unit_of_meas": "°C",
    }


def test_config_json_is_one_line_with_degree_sign(host):
    service = DiscoveryService(host)
    reading = _named("acpitz-acpi-0\ntemp1:  N/A\n")[0]

    encoded = service.build_config(reading).to_json()

    assert "\n" not in encoded
    assert '"unit_of_meas":"°C"' in encoded
    assert json.loads(encoded)["name"] == "ACPI Temp"


def test_one_config_per_occurrence_even_for_duplicate_ids(host):
    service = DiscoveryService(host)
    readings = _named("acpitz-acpi-0\ntemp1:  +30.0°C\ntemp1:  +31.0°C\n")

    configs = service.build_configs(readings)

    assert [topic for topic, _ in configs] == [
        "homeassistant/sensor/4f2c0e7d/acpitz_acpi_0_temp1/config",
        "homeassistant/sensor/4f2c0e7d/acpitz_acpi_0_temp1/config",
    ]


def test_state_snapshot_json(host):
    service = DiscoveryService(host)
    state = service.build_state({"a_temp1": "30.0", "b_temp1": "N/A"})

    assert json.loads(state.to_json()) == {"a_temp1": "30.0", "b_temp1": "N/A"}


def test_payloads_serialize_compactly(host):
    service = DiscoveryService(host)
    reading = _named("coretemp-isa-0000\nCore 0:  +45.0°C\n")[0]

    encoded = service.build_config(reading).to_json()

    assert encoded.startswith('{"dev":{"ids":["4f2c0e7d"],"name":"pve"')
    assert encoded.endswith('"entity_category":"diagnostic","unit_of_meas":"°C"}')
    assert service.build_state({"a_temp1": "30.0", "b_temp1": "N/A"}).to_json() == '{"a_temp1":"30.0","b_temp1":"N/A"}'
    assert service.build_state({}).to_json() == "{}"
