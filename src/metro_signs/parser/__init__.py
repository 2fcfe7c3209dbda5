"""Line description parsing."""

from metro_signs.parser.model import (
    ConfigCode,
    Direction,
    Pointing,
    Segment,
    Travel,
    Variant,
)
from metro_signs.parser.stations import load_line_description, parse_line_description

__all__ = [
    "ConfigCode",
    "Direction",
    "Pointing",
    "Segment",
    "Travel",
    "Variant",
    "load_line_description",
    "parse_line_description",
]
