from pathlib import Path

import pytz
from tabulate import tabulate_formats

from tcxkit.appconfig import DEFAULT_CONFIG, save_config


def run(path: Path | None = None) -> Path:
    print("Welcome to tcxkit configuration!")
    config = {}

    # Home timezone
    print("\n--- Timezone Configuration ---")
    print("Activity times are shown in this timezone, e.g. US/Eastern, Europe/Berlin")
    while True:
        timezone = input(f"Home timezone (default: {DEFAULT_CONFIG['home_timezone']}): ").strip()
        timezone = timezone or DEFAULT_CONFIG["home_timezone"]
        if timezone in pytz.all_timezones_set:
            break
        print(f"Unknown timezone: {timezone}")
    config["home_timezone"] = timezone

    # Debug mode
    debug_input = input("\nEnable debug mode? (y/N): ").strip().lower()
    config["debug"] = debug_input == "y"

    # Table format for the laps command
    print("\n--- Output Configuration ---")
    tablefmt = input(f"Table format for 'laps' (default: {DEFAULT_CONFIG['tablefmt']}): ").strip()
    if tablefmt and tablefmt not in tabulate_formats:
        print(f"Unknown table format {tablefmt!r}, using {DEFAULT_CONFIG['tablefmt']}")
        tablefmt = ""
    config["tablefmt"] = tablefmt or DEFAULT_CONFIG["tablefmt"]

    config_path = save_config(config, path)
    print(f"\nConfiguration saved to {config_path.resolve()}")
    return config_path
