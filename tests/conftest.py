import os
from datetime import UTC, datetime, timedelta

import pytest

from tcxkit.models import Activity, HeartRate, Lap, Position, Sample, SensorState, Sport, Track

START = datetime(2024, 5, 27, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Keep a developer's tcxkit_config.json / TCXKIT_* variables out of the tests."""
    import tcxkit.appconfig as tcfg

    monkeypatch.setattr(tcfg, "_FILE_PATHS", [])
    for env_name in tcfg._ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture
def make_track():
    """Build a Track from altitudes (None = not recorded) and heart rates."""

    def _make(altitudes=(), heart_rates=None):
        heart_rates = heart_rates if heart_rates is not None else [120] * len(altitudes)
        samples = tuple(
            Sample(
                time=START + timedelta(seconds=i),
                heart_rate=HeartRate(hr),
                sensor_state=SensorState.PRESENT,
                position=Position(38.5, -120.2),
                altitude=alt,
            )
            for i, (alt, hr) in enumerate(zip(altitudes, heart_rates))
        )
        return Track(samples=samples)

    return _make


@pytest.fixture
def make_lap():
    def _make(time=300.0, distance=1000.0, track=None, **kwargs):
        return Lap(time=time, distance=distance, track=track or Track(), **kwargs)

    return _make


@pytest.fixture
def make_activity():
    def _make(*laps, sport=Sport.RUNNING):
        return Activity(sport=sport, id=START, laps=tuple(laps))

    return _make


MINIMAL_TCX = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase>
  <Activities>
    <Activity>
      <Sport>Running</Sport>
      <Id>2024-05-27T12:00:00Z</Id>
      <Lap>
        <TotalTimeSeconds>300</TotalTimeSeconds>
        <DistanceMeters>1000</DistanceMeters>
        <Track>
          <Trackpoint>
            <Time>2024-05-27T12:00:00Z</Time>
            <AltitudeMeters>10</AltitudeMeters>
            <HeartRateBpm><Value>120</Value></HeartRateBpm>
            <SensorState>Present</SensorState>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-27T12:05:00Z</Time>
            <AltitudeMeters>15</AltitudeMeters>
            <HeartRateBpm><Value>140</Value></HeartRateBpm>
            <SensorState>Present</SensorState>
          </Trackpoint>
        </Track>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""


@pytest.fixture
def minimal_tcx():
    return MINIMAL_TCX


@pytest.fixture
def minimal_tcx_file(tmp_path):
    path = tmp_path / "minimal.tcx"
    path.write_text(MINIMAL_TCX, encoding="utf-8")
    return path


@pytest.fixture
def sample_tcx_path():
    return os.path.join(os.path.dirname(__file__), "fileformats", "samples", "sample.tcx")
