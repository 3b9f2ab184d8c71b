from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import threading
import time

from proxsensors.config import AppConfig, load_config, setup_logging
from proxsensors.domain.exceptions import ConfigurationError, PublishError
from proxsensors.enums.sensors import AvailabilityState
from proxsensors.hardware.adapters import CommandSensorSource, FileSensorSource, HostMetadataReader
from proxsensors.hardware.mqtt.mqtt_publisher import DryRunPublisher, MQTTPublisher
from proxsensors.services.sensor_publish_service import SensorPublishService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PUBLISH_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proxsensors-publish",
        description="Publish lm-sensors temperatures to Home Assistant over MQTT.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--once", action="store_true", help="Publish a single pass and exit (default)")
    mode.add_argument(
        "--interval",
        type=float,
        metavar="SECONDS",
        help="Publish every SECONDS until interrupted",
    )
    parser.add_argument("--input", metavar="FILE", help="Read sensors output from FILE instead of running it")
    parser.add_argument("--dry-run", action="store_true", help="Log messages instead of publishing them")
    parser.add_argument("--host", help="MQTT broker host")
    parser.add_argument("--port", type=int, help="MQTT broker port")
    parser.add_argument("--qos", type=int, choices=(0, 1, 2), help="MQTT quality of service")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with CLI flags applied (re-validated)."""
    overrides = {}
    if args.host:
        overrides["mqtt_broker_host"] = args.host
    if args.port is not None:
        overrides["mqtt_broker_port"] = args.port
    if args.qos is not None:
        overrides["mqtt_qos"] = args.qos
    if args.debug:
        overrides["DEBUG"] = True
    if args.once:
        overrides["publish_interval_seconds"] = 0.0
    elif args.interval is not None:
        overrides["publish_interval_seconds"] = args.interval
    return dataclasses.replace(config, **overrides) if overrides else config


def run_loop(service: SensorPublishService, interval: float, stop_event: threading.Event) -> None:
    """Run passes on a fixed schedule until ``stop_event`` is set."""
    next_run = time.monotonic()
    while not stop_event.is_set():
        service.run_pass()
        next_run += interval
        delay = next_run - time.monotonic()
        if delay < 0:
            logger.warning("Pass overran the %ss interval by %.1fs", interval, -delay)
            next_run = time.monotonic()
            delay = 0
        stop_event.wait(delay)


def main(argv: list[str] | None = None, stop_event: threading.Event | None = None) -> int:
    """Publish sensor readings once or on a fixed interval."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(), args)
    except (ConfigurationError, ValueError) as e:
        parser.print_usage(sys.stderr)
        print(f"proxsensors-publish: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(debug=config.DEBUG, log_file=config.log_file or None, level=config.log_level)

    source = (
        FileSensorSource(args.input)
        if args.input
        else CommandSensorSource(config.sensors_command, timeout=config.sensors_timeout_seconds)
    )
    publisher = (
        DryRunPublisher()
        if args.dry_run
        else MQTTPublisher(
            broker=config.mqtt_broker_host,
            port=config.mqtt_broker_port,
            client_id=config.mqtt_client_id,
            username=config.mqtt_username,
            password=config.mqtt_password,
            keepalive=config.mqtt_keepalive,
        )
    )
    recurring = config.publish_interval_seconds > 0
    # availability messages share the retain flag of the last will
    service = SensorPublishService(source, HostMetadataReader(), publisher, config, retain_availability=recurring)

    if recurring:
        status_topic = service.build_discovery().status_topic
        publisher.set_will(status_topic, AvailabilityState.OFFLINE.value, qos=config.mqtt_qos, retain=True)

    try:
        publisher.connect()
    except PublishError as e:
        logger.error("%s", e)
        return EXIT_PUBLISH_ERROR

    try:
        if not recurring:
            report = service.run_pass()
            return EXIT_OK if report.ok else EXIT_PUBLISH_ERROR

        logger.info("Publishing every %ss (press Ctrl+C to stop)", config.publish_interval_seconds)
        try:
            run_loop(service, config.publish_interval_seconds, stop_event or threading.Event())
        except KeyboardInterrupt:
            logger.info("Stopping publisher...")
        service.publish_offline()
        return EXIT_OK
    finally:
        publisher.disconnect()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
