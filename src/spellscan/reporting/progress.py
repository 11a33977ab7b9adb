"""Progress signals for the dictionary load."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class LoggingProgress:
    """Logs the loading bracket as key=value messages."""

    def loading_started(self) -> None:
        logger.info("event=dictionary_loading status=started")

    def loading_finished(self) -> None:
        logger.info("event=dictionary_loading status=finished")


class ConsoleProgress:
    """Prints a one-line loading indicator to a stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def loading_started(self) -> None:
        self.stream.write("Loading dictionary...")
        self.stream.flush()

    def loading_finished(self) -> None:
        self.stream.write(" done\n")
        self.stream.flush()
