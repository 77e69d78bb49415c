"""Typed, immutable model of a Training Center XML document.

The records mirror the nested TCX schema (database → activities → laps →
tracks → trackpoints) and carry the read-only statistics computed from it.
Nothing in here knows how the records are decoded; see
``tcxkit.formats.tcx`` for that.

Units: distances and altitudes in meters, times in seconds, heart rate in
beats per minute, cadence in steps per minute.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from datetime import datetime, timedelta
from enum import Enum
from itertools import pairwise
from typing import NamedTuple

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Sport(Enum):
    RUNNING = "Running"
    BIKING = "Biking"
    OTHER = "Other"


class SensorState(Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


# ---------------------------------------------------------------------------
# Value records
# ---------------------------------------------------------------------------


class HeartRate(NamedTuple):
    value: int

    def __int__(self) -> int:
        return self.value


class Position(NamedTuple):
    lat: float
    lon: float


class Sample(NamedTuple):
    """A single trackpoint reading."""

    time: datetime
    heart_rate: HeartRate
    sensor_state: SensorState
    position: Position | None = None
    altitude: float | None = None


# ---------------------------------------------------------------------------
# Track / Lap / Activity
# ---------------------------------------------------------------------------


def _altitude_difference(a: Sample, b: Sample) -> float | None:
    if a.altitude is None or b.altitude is None:
        return None
    return a.altitude - b.altitude


class Track(NamedTuple):
    samples: tuple[Sample, ...] = ()

    def ascent(self) -> float:
        """Total ascent in meters."""
        diffs = (_altitude_difference(b, a) for a, b in pairwise(self.samples))
        return sum((d for d in diffs if d is not None and d > 0), 0.0)

    def descent(self) -> float:
        """Total descent in meters."""
        diffs = (_altitude_difference(a, b) for a, b in pairwise(self.samples))
        return sum((d for d in diffs if d is not None and d > 0), 0.0)

    def heart_rate(self) -> int:
        """Mean sample heart rate, 0 for an empty track."""
        if not self.samples:
            return 0
        return sum(s.heart_rate.value for s in self.samples) // len(self.samples)

    def max_heart_rate(self) -> int:
        return max((s.heart_rate.value for s in self.samples), default=0)


class Lap(NamedTuple):
    """A contiguous segment of an activity.

    ``calories``, ``cadence`` and the heart-rate summaries are optional
    because not every device writes them. When a summary is missing the
    value is derived from the lap's track instead.
    """

    time: float
    distance: float
    track: Track
    calories: int | None = None
    cadence: int | None = None
    average_heart_rate: HeartRate | None = None
    maximum_heart_rate: HeartRate | None = None
    start_time: datetime | None = None

    @property
    def distance_km(self) -> float:
        return self.distance / 1000.0

    def heart_rate(self) -> int:
        if self.average_heart_rate is not None:
            return self.average_heart_rate.value
        return self.track.heart_rate()

    def max_heart_rate(self) -> int:
        if self.maximum_heart_rate is not None:
            return self.maximum_heart_rate.value
        return self.track.max_heart_rate()

    def pace(self) -> float:
        """Seconds per kilometer.

        A lap without distance has no meaningful pace; the result is
        ``inf`` (or ``nan`` when the lap has no time either), the same value
        a float division by zero would give.
        """
        if self.distance == 0:
            if self.time == 0:
                return math.nan
            return math.copysign(math.inf, self.time)
        return self.time / self.distance_km


class Activity(NamedTuple):
    """One workout session and its derived statistics.

    Every aggregate copes with an activity that has no laps: sums are 0 and
    count-based averages fall back to 0 instead of dividing by zero.
    """

    sport: Sport
    id: datetime
    laps: tuple[Lap, ...] = ()

    def distance(self) -> float:
        """Total distance in meters."""
        return sum((lap.distance for lap in self.laps), 0.0)

    def duration(self) -> timedelta:
        # each lap is truncated to whole seconds before summing
        secs = sum(int(lap.time) for lap in self.laps)
        return timedelta(seconds=secs)

    def heart_rate(self) -> int:
        """Mean of the per-lap average heart rates, each lap weighted equally."""
        if not self.laps:
            return 0
        return sum(lap.heart_rate() for lap in self.laps) // len(self.laps)

    def max_heart_rate(self) -> int:
        return max((lap.max_heart_rate() for lap in self.laps), default=0)

    def calories(self) -> int:
        return sum(lap.calories or 0 for lap in self.laps)

    def cadence(self) -> int:
        """Mean cadence of the laps that recorded one."""
        values = [lap.cadence for lap in self.laps if lap.cadence is not None]
        if not values:
            return 0
        return sum(values) // len(values)

    def ascent(self) -> float:
        """Total ascent in meters."""
        return sum((lap.track.ascent() for lap in self.laps), 0.0)

    def descent(self) -> float:
        """Total descent in meters."""
        return sum((lap.track.descent() for lap in self.laps), 0.0)

    def average_tempo(self) -> float:
        """Average tempo in seconds per kilometer.

        This is the mean of the per-lap paces, not total time over total
        distance; the two differ whenever laps have unequal distances.
        A lap with zero distance makes the result non-finite.
        """
        if not self.laps:
            return 0.0
        return sum(lap.pace() for lap in self.laps) / len(self.laps)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class ActivityRecord(NamedTuple):
    """The ``Activities`` envelope of a TCX document."""

    activities: tuple[Activity, ...]

    @property
    def activity(self) -> Activity:
        return self.activities[0]


class Database(NamedTuple):
    """Root of a decoded ``TrainingCenterDatabase``."""

    activities: tuple[ActivityRecord, ...] = ()

    def iter_activities(self) -> Iterator[Activity]:
        """Yield every activity in file order."""
        for record in self.activities:
            yield from record.activities
