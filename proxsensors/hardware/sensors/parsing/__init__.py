"""
Sensors Output Parsing
======================
Turns raw lm-sensors text into an ordered sequence of canonical readings.

    raw text -> classify_line -> SensorsOutputParser -> CanonicalReading[]
"""

from .line_classifier import ClassifiedLine, classify_line
from .sensors_parser import ParseResult, SensorsOutputParser, parse_sensors_output

__all__ = [
    "ClassifiedLine",
    "ParseResult",
    "SensorsOutputParser",
    "classify_line",
    "parse_sensors_output",
]
