"""
Sensor Text Sources
===================
Acquire raw sensor text by running the lm-sensors ``sensors`` command or
by reading a saved snapshot from disk.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from proxsensors.domain.exceptions import SensorSourceError

from .base_adapter import ISensorTextSource

logger = logging.getLogger(__name__)


class CommandSensorSource(ISensorTextSource):
    """Runs a command (default ``sensors``) and returns its stdout."""

    def __init__(self, command: str = "sensors", timeout: float = 10.0):
        self.command = command
        self.args = shlex.split(command)
        self.timeout = timeout

    def read_text(self) -> str:
        if not self.args:
            raise SensorSourceError("No sensors command configured.")
        try:
            completed = subprocess.run(
                self.args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise SensorSourceError(
                f"Sensors command not found: {self.args[0]}",
                detail={"command": self.command},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SensorSourceError(
                f"Sensors command timed out after {self.timeout}s",
                detail={"command": self.command, "timeout": self.timeout},
            ) from e

        if completed.returncode != 0:
            # sensors exits non-zero when a single chip fails to read but
            # still prints everything else, so keep whatever it produced
            if completed.stdout.strip():
                logger.warning(
                    "Sensors command exited with %s; using partial output. stderr: %s",
                    completed.returncode,
                    completed.stderr.strip(),
                )
                return completed.stdout
            raise SensorSourceError(
                f"Sensors command failed with exit code {completed.returncode}",
                detail={"command": self.command, "stderr": completed.stderr.strip()},
            )

        logger.debug("Read %s bytes from %s", len(completed.stdout), self.command)
        return completed.stdout

    def describe(self) -> str:
        return f"command:{self.command}"


class FileSensorSource(ISensorTextSource):
    """Reads a saved sensors snapshot from a file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise SensorSourceError(
                f"Cannot read sensors snapshot {self.path}: {e}",
                detail={"path": str(self.path)},
            ) from e

    def describe(self) -> str:
        return f"file:{self.path}"
