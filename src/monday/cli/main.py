# src/monday/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file, then runs the console loop until
`bye` or end of input.
"""

from __future__ import annotations

import argparse
import logging

from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.ports import ConsoleIO
from ..logging_setup import setup_logging
from .bootstrap import create_assistant

logger = logging.getLogger(__name__)


def build_parser(default_path: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="monday", description="Personal task tracker.")
    p.add_argument(
        "-f",
        "--file",
        default=default_path,
        help=f"Path to tasks file (default: {default_path})",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = build_parser(str(settings.tasks_path)).parse_args(argv)

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=console_level,
    )
    logger.info("Starting %s...", settings.app_name)

    assistant = create_assistant(settings=settings, tasks_path=args.file)
    io = ConsoleIO()
    io.write(assistant.load())

    run_console_loop(assistant, io, prompt=settings.prompt)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
