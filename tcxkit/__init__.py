"""This is the init module for tcxkit"""

from .errors import DecodeError
from .formats import decode, parse_tcx
from .models import (
    Activity,
    ActivityRecord,
    Database,
    HeartRate,
    Lap,
    Position,
    Sample,
    SensorState,
    Sport,
    Track,
)

__version__ = "0.1.0"
__all__ = [
    "Activity",
    "ActivityRecord",
    "Database",
    "DecodeError",
    "HeartRate",
    "Lap",
    "Position",
    "Sample",
    "SensorState",
    "Sport",
    "Track",
    "decode",
    "parse_tcx",
]
