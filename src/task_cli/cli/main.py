# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the tracker, runs exactly one command and prints
its result. The exit status is always 0: errors are reported as text.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_tracker
from ..cli.commands import registry
from ..config import Settings, get_settings
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    setup_logging(
        console_level=level_from_name(settings.log_level),
        log_dir=settings.log_dir if settings.log_to_file else None,
    )
    logger.debug("Invoked with argv=%r", list(argv))

    try:
        tracker = create_tracker(settings=settings)
        output = registry.handle(tracker, list(argv))
    except Exception as e:
        # Never crash to the shell with a traceback.
        logger.exception("Unexpected failure.")
        output = f"Error: {e}"

    print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
