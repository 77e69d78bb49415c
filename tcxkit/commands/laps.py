"""CLI command: laps — show a per-lap breakdown table for each activity."""

import argparse

from tabulate import tabulate

from tcxkit.appconfig import load_config
from tcxkit.commands import home_timezone, load_database
from tcxkit.models import Activity
from tcxkit.utils import format_hms, format_local_time, format_pace

HEADERS = ["Lap", "Start", "Distance (km)", "Time", "Pace", "HR", "Max HR", "kcal", "Cadence", "⬈ m", "⬊ m"]


def lap_rows(activity: Activity, home_timezone: str = "UTC") -> list[list]:
    rows = []
    for number, lap in enumerate(activity.laps, start=1):
        rows.append(
            [
                number,
                format_local_time(lap.start_time, home_timezone),
                f"{lap.distance_km:.2f}",
                format_hms(lap.time),
                format_pace(lap.pace()),
                lap.heart_rate(),
                lap.max_heart_rate(),
                lap.calories if lap.calories is not None else "—",
                lap.cadence if lap.cadence is not None else "—",
                f"{lap.track.ascent():.1f}",
                f"{lap.track.descent():.1f}",
            ]
        )
    return rows


def run(args=None, config=None) -> int:
    parser = argparse.ArgumentParser(prog="tcxkit laps", description="Show per-lap statistics for a TCX file")
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

    for index, activity in enumerate(activities):
        if index:
            print()
        print(f"{activity.sport.value} ({format_local_time(activity.id, home_tz)})")
        if not activity.laps:
            print("  No laps recorded.")
            continue
        print(tabulate(lap_rows(activity, home_tz), headers=HEADERS, tablefmt=config["tablefmt"]))
    return 0
