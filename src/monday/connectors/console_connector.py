# src/monday/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.assistant import Monday
from ..core.ports import ConsoleIO

logger = logging.getLogger(__name__)


def run_console_loop(assistant: Monday, io: ConsoleIO | None = None, *, prompt: str = "> ") -> None:
    """
    Blocking read-eval-print loop. One line is fully handled (including the
    file rewrite) before the next is read. Only `bye` or end of input stops it.
    """
    io = io or ConsoleIO()
    logger.info("Console connector started (%d tasks).", assistant.tasks.size())

    while True:
        try:
            line = io.read_line(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            io.write("")
            break

        if not line.strip():
            continue

        try:
            reply = assistant.respond(line)
        except Exception:
            logger.exception("Command handler crashed.")
            io.write("Internal error while handling a command.")
            continue

        io.write(reply.text)
        if reply.exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
