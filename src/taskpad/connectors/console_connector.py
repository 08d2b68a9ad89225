# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core import messages
from ..core.state import AppState

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "_" * 60
LINE_PREFIX = "    "
ERROR_PREFIX = "OOPS!!! "
EXIT_WORDS = ("bye", "exit")


class ConsoleSink:
    """
    OutputSink that prints framed, indented blocks.

    Each write_* call is one block: a horizontal line, the indented lines, and a
    closing horizontal line.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys (which swaps sys.stdout) sees the output.
        return self._stream if self._stream is not None else sys.stdout

    def _block(self, lines: tuple[str, ...]) -> None:
        out = [HORIZONTAL_LINE]
        out.extend(LINE_PREFIX + line for line in lines)
        out.append(HORIZONTAL_LINE)
        self.stream.write("\n".join(out) + "\n")
        self.stream.flush()

    def write_line(self, text: str) -> None:
        self._block((text,))

    def write_lines(self, *texts: str) -> None:
        self._block(texts)

    def write_error(self, text: str) -> None:
        self._block((ERROR_PREFIX + text,))


def run_console_loop(state: AppState, *, prompt: str = "") -> None:
    logger.info("Console started (tasks=%d).", state.task_list.size())
    state.ui.write_line(messages.GREETING)

    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        line = line.strip()
        if not line:
            continue

        if line.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            state.ui.write_error(messages.ERROR_INTERNAL)

    state.ui.write_line(messages.FAREWELL)
    logger.info("Console finished.")
