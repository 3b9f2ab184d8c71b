"""
Line Classifier
===============
Categorizes each line of `sensors` output.

Checks run in a fixed order, first match wins:

    blank -> device header -> adapter -> reading -> unrecognized

The device-header check must precede the reading check so a bare device
name is never mistaken for anything else.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from proxsensors.enums.sensors import LineKind

DEVICE_HEADER_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
ADAPTER_PATTERN = re.compile(r"^Adapter:\s*(?P<adapter>.*)")

# Label characters are alphanumerics, underscore, dot, space and dash. A
# colon is also accepted inside the label: the lazy match stops at the first
# colon followed by whitespace and a complete value, i.e. one that ends at
# whitespace, a degree sign, the C unit marker or the end of the line. So
# "Sensor 1: 2:  +38.9°C" reads as label "Sensor 1: 2" with value "+38.9".
READING_PATTERN = re.compile(
    r"^\s*(?P<label>[A-Za-z0-9_. :-]+?):\s+"
    r"(?P<value>\+?[0-9]+(?:\.[0-9]+)?|N/A)(?=\s|°|C|$)"
    r"(?:\s*C)?"
)


@dataclass(frozen=True)
class ClassifiedLine:
    """A line of input together with its category and captured groups."""

    kind: LineKind
    text: str
    device: str | None = None
    adapter: str | None = None
    label: str | None = None
    value: str | None = None


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one line of sensors output.

    Args:
        line: Raw line, with or without its trailing newline.

    Returns:
        ClassifiedLine carrying the groups relevant to its kind.
    """
    line = line.rstrip("\r\n")
    trimmed = line.strip()

    if not trimmed:
        return ClassifiedLine(LineKind.BLANK, line)

    if DEVICE_HEADER_PATTERN.match(trimmed):
        return ClassifiedLine(LineKind.DEVICE_HEADER, line, device=trimmed)

    match = ADAPTER_PATTERN.match(trimmed)
    if match:
        return ClassifiedLine(LineKind.ADAPTER, line, adapter=match.group("adapter"))

    match = READING_PATTERN.match(line)
    if match:
        return ClassifiedLine(
            LineKind.READING,
            line,
            label=match.group("label"),
            value=match.group("value"),
        )

    return ClassifiedLine(LineKind.UNRECOGNIZED, line)
