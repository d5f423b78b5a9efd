# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from gamerecon.app import reconcile_files
from gamerecon.config import ConfigurationError, configure_logging, get_reconcile_config
from gamerecon.domain.model import Region
from gamerecon.ui.report import render_json, render_table, render_venn_json

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_region(value: str) -> Region:
    normalized = value.strip().lower().replace("-", "_")
    try:
        return Region(normalized)
    except ValueError as exc:
        choices = ", ".join(region.value for region in Region)
        raise argparse.ArgumentTypeError(
            f"Invalid region: {value} (choose from {choices})"
        ) from exc


def _parse_args(argv: Sequence[str], *, default_filter: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile CMS, Content Hub and UPAM game catalogs"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Print the membership summary table")
    report.add_argument(
        "paths",
        nargs="+",
        help="Exported JSON files or zip archives (file names select the source)",
    )
    report.add_argument(
        "--filter",
        default=default_filter,
        help="Comma-separated game id substrings (default: $GAMERECON_FILTER)",
    )
    report.add_argument(
        "--expand",
        type=_parse_region,
        action="append",
        default=[],
        help="List the games of a region (repeatable), e.g. cms_only",
    )
    report.add_argument(
        "--expand-all",
        action="store_true",
        help="List the games of every region",
    )
    report.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: %(default)s)",
    )

    venn = subparsers.add_parser("venn", help="Print Venn diagram regions as JSON")
    venn.add_argument("paths", nargs="+", help="Exported JSON files or zip archives")
    venn.add_argument(
        "--filter",
        default=default_filter,
        help="Comma-separated game id substrings (default: $GAMERECON_FILTER)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_reconcile_config()
    except ConfigurationError:
        configure_logging(level=logging.INFO)
        log.exception("Invalid configuration")
        sys.exit(2)
    configure_logging(level=config.log_level)

    parsed_args = _parse_args(args_list, default_filter=config.default_filter)

    try:
        report = reconcile_files(parsed_args.paths, filter_text=parsed_args.filter)
        if parsed_args.command == "report":
            if parsed_args.format == "json":
                print(
                    render_json(
                        report.result,
                        environment=report.environment,
                        loaded_sources=report.snapshot.loaded_sources,
                    )
                )
            else:
                expand = tuple(Region) if parsed_args.expand_all else tuple(parsed_args.expand)
                print(
                    render_table(
                        report.result,
                        expand=expand,
                        environment=report.environment,
                        loaded_sources=report.snapshot.loaded_sources,
                    )
                )
        elif parsed_args.command == "venn":
            print(render_venn_json(report.result))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
