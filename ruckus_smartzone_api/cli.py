"""
Command-line demo for the SmartZone client.

Logs in with settings from the environment (see :mod:`ruckus_smartzone_api.config`),
lists APs, zones or controller nodes, and logs out.

Usage:
    smartzone-demo aps [--csv PATH | --json PATH] [-v]
    smartzone-demo zones
    smartzone-demo controller
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .config import SmartZoneSettings
from .exceptions import SmartZoneControllerError, SmartZonePaginationError
from .export import export_csv, export_json
from .logging import get_logger

logger = get_logger(__name__)

COMMANDS = ("aps", "zones", "controller")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartzone-demo",
        description="List resources from a Ruckus SmartZone controller",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  SZ_HOST, SZ_USER, SZ_PASS   Controller and credentials (HOST and PASS also accepted)
  SZ_API_VERSION              Public API version (default: 8_1)
  SZ_VERIFY_SSL               Verify the controller certificate (default: false)
""",
    )
    parser.add_argument("command", choices=COMMANDS, nargs="?", default="aps",
                        help="What to list (default: aps)")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--csv", metavar="PATH", help="Write the records to a CSV file")
    output.add_argument("--json", metavar="PATH", help="Write the records to a JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def fetch(client, command: str) -> List:
    if command == "aps":
        return client.get_all_aps()
    if command == "zones":
        return client.get_all_zones()
    return client.get_controller_summary().items


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = SmartZoneSettings.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    client = settings.create_client()
    try:
        with client:
            records = fetch(client, args.command)
    except SmartZonePaginationError as e:
        logger.error(f"{e} ({len(e.partial_results)} records fetched before the failure)")
        return 1
    except SmartZoneControllerError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    if args.csv:
        export_csv(records, args.csv)
    elif args.json:
        export_json(records, args.json)
    else:
        for record in records:
            print(record)
    logger.info(f"{len(records)} {args.command} records")
    return 0


if __name__ == "__main__":
    sys.exit(main())
