from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import ScanConfig
from .exceptions import ConfigError, SnapshotError
from .scanning import WorldItemScanner
from .snapshot import load_world
from .summary import format_summary, summarize


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _cmd_scan(args: argparse.Namespace) -> int:
    try:
        config = ScanConfig.load(args.config)
        world = load_world(args.snapshot)
    except SnapshotError as e:
        print(e.to_human(), file=sys.stderr)
        return 2
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 2

    scanner = WorldItemScanner(world, world, world, world, config=config)
    found = scanner.get_all_owned_items()
    print(format_summary(summarize(found)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="world-items",
        description="List every item the player owns in a world snapshot",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan a YAML world snapshot and print owned totals")
    scan.add_argument("snapshot", type=Path, help="Path to the world snapshot (YAML)")
    scan.add_argument("--config", type=Path, default=None, help="Optional YAML file overriding scan defaults")
    scan.set_defaults(func=_cmd_scan)

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
