"""TCX file format decoder for tcxkit.

This module turns a TCX (Training Center XML) document into the typed records
of ``tcxkit.models``. The tag-to-field binding lives in a declarative table
(``_SCHEMA``) so the model classes stay free of any XML knowledge.

Decoding is all-or-nothing: any problem with the document raises
``DecodeError`` and no partial ``Database`` is returned.
"""

from __future__ import annotations

import gzip
import io
import logging
import math
import os
import xml.etree.ElementTree as ET
from collections import defaultdict
from collections.abc import Callable
from datetime import UTC, datetime
from typing import IO, Any, NamedTuple

from dateutil import parser as dt_parser

from tcxkit.errors import DecodeError
from tcxkit.models import (
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

logger = logging.getLogger(__name__)

ROOT_TAG = "TrainingCenterDatabase"

# ---------------------------------------------------------------------------
# Value converters (text -> python value)
# ---------------------------------------------------------------------------


def _timestamp(text: str) -> datetime:
    dt = dt_parser.isoparse(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def _merge_tracks(tracks: tuple[Track, ...]) -> Track:
    # devices start a new <Track> after a pause; keep them as one sequence
    if len(tracks) == 1:
        return tracks[0]
    return Track(samples=tuple(s for t in tracks for s in t.samples))


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class _Field(NamedTuple):
    tag: str  # local element (or attribute) name
    name: str  # record field name
    kind: Any  # text converter, or a record type listed in _SCHEMA
    required: bool = True
    repeated: bool = False
    combine: Callable[[tuple], Any] | None = None


_SCHEMA: dict[type, tuple[_Field, ...]] = {
    Database: (_Field("Activities", "activities", ActivityRecord, required=False, repeated=True),),
    ActivityRecord: (_Field("Activity", "activities", Activity, repeated=True),),
    Activity: (
        _Field("Sport", "sport", Sport),
        _Field("Id", "id", _timestamp),
        _Field("Lap", "laps", Lap, required=False, repeated=True),
    ),
    Lap: (
        _Field("TotalTimeSeconds", "time", _finite_float),
        _Field("DistanceMeters", "distance", _finite_float),
        _Field("Track", "track", Track, repeated=True, combine=_merge_tracks),
        _Field("Calories", "calories", int, required=False),
        _Field("Cadence", "cadence", int, required=False),
        _Field("AverageHeartRateBpm", "average_heart_rate", HeartRate, required=False),
        _Field("MaximumHeartRateBpm", "maximum_heart_rate", HeartRate, required=False),
        _Field("StartTime", "start_time", _timestamp, required=False),
    ),
    Track: (_Field("Trackpoint", "samples", Sample, required=False, repeated=True),),
    Sample: (
        _Field("Time", "time", _timestamp),
        _Field("Position", "position", Position, required=False),
        _Field("AltitudeMeters", "altitude", _finite_float, required=False),
        _Field("HeartRateBpm", "heart_rate", HeartRate),
        _Field("SensorState", "sensor_state", SensorState),
    ),
    Position: (
        _Field("LatitudeDegrees", "lat", _finite_float),
        _Field("LongitudeDegrees", "lon", _finite_float),
    ),
    HeartRate: (_Field("Value", "value", int),),
}


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    return tag.rsplit("}", 1)[-1]


def _join(path: str, tag: str, index: int | None = None) -> str:
    step = f"{tag}[{index}]" if index is not None else tag
    return f"{path}/{step}" if path else step


def _convert(field: _Field, node: ET.Element | str, path: str) -> Any:
    if field.kind in _SCHEMA:
        if not isinstance(node, ET.Element):
            raise DecodeError(f"expected a <{field.tag}> element", path)
        return _decode_record(node, field.kind, path)

    text = node if isinstance(node, str) else (node.text or "")
    text = text.strip()
    try:
        return field.kind(text)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DecodeError(f"invalid value {text!r} for {field.tag}", path) from exc


def _decode_record(element: ET.Element, record_type: type, path: str) -> Any:
    children: dict[str, list[ET.Element]] = defaultdict(list)
    for child in element:
        if isinstance(child.tag, str):  # skip comments / processing instructions
            children[_local_name(child.tag)].append(child)
    attributes = {_local_name(k): v for k, v in element.attrib.items()}

    values: dict[str, Any] = {}
    for field in _SCHEMA[record_type]:
        nodes: list[ET.Element | str] = list(children.get(field.tag, ()))
        if not nodes and field.tag in attributes:
            nodes = [attributes[field.tag]]

        if not nodes:
            if field.required:
                raise DecodeError(f"missing required field {field.tag}", path or None)
            values[field.name] = () if field.repeated else None
            continue

        if field.repeated:
            value: Any = tuple(
                _convert(field, node, _join(path, field.tag, i)) for i, node in enumerate(nodes, start=1)
            )
            if field.combine is not None:
                value = field.combine(value)
        else:
            value = _convert(field, nodes[0], _join(path, field.tag))
        values[field.name] = value

    return record_type(**values)


def decode(stream: IO) -> Database:
    """Decode a TCX document from a readable stream.

    Raises:
        DecodeError: if the markup is malformed or does not fit the schema.
    """
    try:
        root = ET.parse(stream).getroot()
    except ET.ParseError as exc:
        raise DecodeError(f"XML parse error: {exc}") from exc

    if _local_name(root.tag) != ROOT_TAG:
        raise DecodeError(f"unexpected root element <{_local_name(root.tag)}>, expected <{ROOT_TAG}>")

    database = _decode_record(root, Database, "")
    logger.debug("Decoded TCX document with %d activities", sum(1 for _ in database.iter_activities()))
    return database


def parse_tcx(file_path: str | os.PathLike) -> Database:
    """Read a .tcx or .tcx.gz file and decode it.

    The file handle is closed before decoding starts, whether or not the
    read succeeds. ``OSError`` from opening the file is not wrapped.
    """
    is_gzipped = os.fspath(file_path).lower().endswith(".gz")
    logger.debug("Parsing TCX file %s (gzipped=%s)", file_path, is_gzipped)

    opener = gzip.open if is_gzipped else open
    with opener(file_path, "rb") as f:
        try:
            data = f.read()
        except (OSError, EOFError) as exc:
            raise DecodeError(f"cannot read {file_path}: {exc}") from exc

    # some exporters put whitespace before the XML declaration
    return decode(io.BytesIO(data.lstrip()))
