"""CLI command: info — print summary statistics for every activity in a TCX file."""

import argparse

from tcxkit.appconfig import load_config
from tcxkit.commands import home_timezone, load_database
from tcxkit.models import Activity
from tcxkit.utils import format_hms, format_local_time, format_pace


def format_activity(activity: Activity, home_timezone: str = "UTC") -> str:
    """Return the multi-line summary block for one activity."""
    lines = [
        f"{activity.sport.value} ({format_local_time(activity.id, home_timezone)})",
        f"  Distance: {activity.distance() / 1000.0:.2f} km",
        f"  Time: {format_hms(activity.duration())}",
        f"  Tempo: {format_pace(activity.average_tempo())}",
        f"  Heart rate: {activity.heart_rate()} bpm (max {activity.max_heart_rate()})",
        f"  Energy: {activity.calories()} kcal",
        f"  Cadence: {activity.cadence()} steps/min",
        f"  Incline: ⬈ {activity.ascent():.1f}, ⬊ {activity.descent():.1f} m",
    ]
    return "\n".join(lines)


def run(args=None, config=None) -> int:
    parser = argparse.ArgumentParser(prog="tcxkit info", description="Show activity statistics for a TCX file")
    parser.add_argument("--input", "-i", required=True, help="Path to a .tcx or .tcx.gz file")
    parsed_args = parser.parse_args(args)
    config = config if config is not None else load_config()
    home_tz = home_timezone(config)
    if home_tz is None:
        return 1

    database = load_database(parsed_args.input)
    if database is None:
        return 1

    activities = list(database.iter_activities())
    if not activities:
        print("No activities found.")
        return 0

    print("\n\n".join(format_activity(a, home_tz) for a in activities))
    return 0
