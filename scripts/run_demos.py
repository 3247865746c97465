"""Command-line interface to run the closurekit demonstrations."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from rich.console import Console

from closurekit import config as app_config
from closurekit.demos import run_demos
from closurekit.errors import UnknownDemoError
from closurekit.reporting import print_report
from closurekit.utils import TimerRegistry, setup_logging

DEFAULT_CONFIG = PROJECT_ROOT / "configs" / "defaults.yaml"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG)
    parser.add_argument("--only", action="append", default=None, metavar="NAME", help="run only this demo (repeatable)")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--no-timing", action="store_true", help="omit the total execution time")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    console = Console()
    # Only the default location may be absent; an explicit path must exist.
    config_path = None if args.config == DEFAULT_CONFIG and not args.config.exists() else args.config
    try:
        config = app_config.load_app_config(config_path)
    except FileNotFoundError as exc:
        console.print(f"[red]config file not found: {exc.filename}[/red]")
        return 2
    if args.only:
        config.demos.names = args.only
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.no_timing:
        config.timing.enabled = False

    setup_logging(level=config.logging.level, rich_tracebacks=config.logging.rich_tracebacks)

    timers = TimerRegistry()
    try:
        with timers.time(config.timing.label):
            results = run_demos(config.demos.names, timers=timers)
    except UnknownDemoError as exc:
        console.print(f"[red]{exc.args[0]}[/red]")
        return 2

    total = timers.elapsed(config.timing.label) if config.timing.enabled else None
    print_report(
        results,
        console=console,
        total=total,
        label=config.timing.label,
        timers=timers if config.timing.enabled else None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
