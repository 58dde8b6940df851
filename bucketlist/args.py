"""Command-line argument parsing and configuration setup."""

import argparse
import os
from pathlib import Path

from . import config
from .config import MapStyle


def parse_args(argv=None):
    """Parse command-line arguments and return parsed args."""
    parser = argparse.ArgumentParser(description="Keep a list of places you want to visit")
    parser.add_argument(
        "--data-dir",
        default=str(config.data_dir),
        help=f"Directory holding saved places, key and settings (default: {config.data_dir})",
    )
    parser.add_argument(
        "--key",
        default=None,
        help=f"Key used to unlock saved places (default: ${config.KEY_ENV_VAR} or the key file in --data-dir)",
    )
    parser.add_argument(
        "--concurrent",
        type=int,
        default=config.max_concurrent,
        help=f"Number of concurrent nearby lookups for 'nearby --all' (default: {config.max_concurrent})",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List saved places")

    add = commands.add_parser("add", help="Drop a new pin at a coordinate")
    add.add_argument("latitude", type=float)
    add.add_argument("longitude", type=float)

    edit = commands.add_parser("edit", help="Rename or describe a saved place")
    edit.add_argument("id", help="Place id or a unique prefix of it")
    edit.add_argument("--name", default=None, help="New name")
    edit.add_argument("--description", default=None, help="New description")
    edit.add_argument(
        "--new-id",
        action="store_true",
        help="Issue a new id for the edited place instead of keeping the old one",
    )

    nearby = commands.add_parser("nearby", help="Show encyclopedia pages near a place")
    target = nearby.add_mutually_exclusive_group(required=True)
    target.add_argument("id", nargs="?", default=None, help="Place id or a unique prefix of it")
    target.add_argument("--all", action="store_true", help="Look up every saved place")
    target.add_argument(
        "--at",
        nargs=2,
        type=float,
        metavar=("LAT", "LON"),
        help="Look up an arbitrary coordinate",
    )

    style = commands.add_parser("style", help="Show or set the map style")
    style.add_argument(
        "style",
        nargs="?",
        choices=[s.value for s in MapStyle],
        default=None,
        help="Map style to remember (omit to show the current one)",
    )

    commands.add_parser("keygen", help="Print a fresh key")

    return parser.parse_args(argv)


def setup_config(argv=None):
    """Parse arguments and apply them to config module."""
    args = parse_args(argv)

    if args.concurrent < 1:
        print("Error: --concurrent must be at least 1.")
        exit(1)

    config.data_dir = Path(args.data_dir).expanduser()
    config.max_concurrent = args.concurrent

    if args.key is None:
        args.key = os.environ.get(config.KEY_ENV_VAR) or None

    return args
