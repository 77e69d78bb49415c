# pylint: disable=import-outside-toplevel
"""Main entry point for the tcxkit CLI.

This module provides the command-line interface for tcxkit, allowing users to
summarise the activities in a TCX file, list their laps, configure their
environment, and access help/documentation.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from tcxkit.appconfig import load_config

load_dotenv()

HELP_TEXT = """
tcxkit - Read Training Center XML (TCX) files and summarise your workouts.

Usage:
    python -m tcxkit <command>

Commands:
    info       Show distance, time, pace, heart rate, calories, cadence and
               elevation for every activity in a file (--input PATH)
    laps       Show a per-lap table for every activity in a file (--input PATH)
    configure  Configure tcxkit for your environment (timezone, output)
    help       Show this help and usage documentation

Both .tcx and gzipped .tcx.gz files are accepted.
"""


def main(argv=None) -> int:
    """Main function for the tcxkit CLI."""
    parser = argparse.ArgumentParser(description="tcxkit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="Show summary statistics for each activity in a TCX file")
    info_parser.add_argument("--input", "-i", required=True, help="Path to a .tcx or .tcx.gz file")

    laps_parser = subparsers.add_parser("laps", help="Show per-lap statistics for each activity in a TCX file")
    laps_parser.add_argument("--input", "-i", required=True, help="Path to a .tcx or .tcx.gz file")

    subparsers.add_parser("configure", help="Configure tcxkit for your environment")
    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(level=logging.DEBUG if config.get("debug") else logging.WARNING)

    if args.command == "info":
        from tcxkit.commands.info import run

        return run(["--input", args.input], config=config)
    elif args.command == "laps":
        from tcxkit.commands.laps import run

        return run(["--input", args.input], config=config)
    elif args.command == "configure":
        from tcxkit.commands.configure import run

        run()
    elif args.command == "help":
        print(HELP_TEXT)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
