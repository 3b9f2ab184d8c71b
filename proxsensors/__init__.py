"""
Proxmox Sensors MQTT
====================
Reads lm-sensors output from the host, derives stable friendly names for
every temperature reading and publishes Home Assistant discovery records
plus one aggregated state snapshot over MQTT.
"""

__version__ = "1.0.0"
