"""CLI commands for tcxkit."""

import sys

import pytz

from tcxkit.errors import DecodeError
from tcxkit.formats.tcx import parse_tcx
from tcxkit.models import Database


def load_database(file_path: str) -> Database | None:
    """Decode *file_path*, printing the error and returning ``None`` on failure."""
    try:
        return parse_tcx(file_path)
    except (DecodeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def home_timezone(config: dict) -> str | None:
    """Return the configured home timezone, or print an error and return ``None``."""
    name = config.get("home_timezone", "UTC")
    if name not in pytz.all_timezones_set:
        print(f"Error: unknown home_timezone {name!r}; run 'python -m tcxkit configure'", file=sys.stderr)
        return None
    return name
