"""Root logger setup for reconciliation runs."""

from __future__ import annotations

import logging
import sys

from .reconcile import get_reconcile_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Send diagnostics to stderr so stdout only carries the report.

    At INFO a run logs one line per loaded file, the kept/skipped counts of each
    adapted document and the sources that were never supplied; skipped records
    and discarded files show up as WARNING and ERROR. Region sizes are DEBUG.
    ``level`` falls back to ``GAMERECON_LOG_LEVEL`` via ``get_reconcile_config``,
    so an invalid value raises ``ConfigurationError`` here too.
    """

    if level is None:
        level = get_reconcile_config().log_level
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
