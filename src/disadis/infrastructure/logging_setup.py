"""Process-wide logging configuration.

Logs go to stderr, or are appended to a file when one is configured.  An
external rotator can move the file away and send ``SIGUSR1``; the handler
then reopens the path so logging continues in a fresh file.
"""

from __future__ import annotations

import logging
import signal
from types import FrameType

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

logger = logging.getLogger(__name__)


class LogReopener:
    """Owns the root logger's file handler and can swap it for a new one."""

    def __init__(self, filename: str | None) -> None:
        self.filename = filename
        self._handler: logging.Handler | None = None

    def reopen(self) -> None:
        """(Re)open the log file; a no-op when logging to stderr."""
        if not self.filename:
            return
        if self._handler is not None:
            logger.info("Reopening log file %s", self.filename)

        new_handler = logging.FileHandler(self.filename, mode="a", encoding="utf-8")
        new_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        root = logging.getLogger()
        root.addHandler(new_handler)
        old_handler, self._handler = self._handler, new_handler
        if old_handler is not None:
            root.removeHandler(old_handler)
            old_handler.close()

    def close(self) -> None:
        """Detach and close the current file handler."""
        if self._handler is None:
            return
        logging.getLogger().removeHandler(self._handler)
        self._handler.close()
        self._handler = None


def configure_logging(level: str = "INFO", filename: str | None = None) -> LogReopener:
    """Configure the root logger once at startup."""
    if filename:
        logging.getLogger().setLevel(level.upper())
    else:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    reopener = LogReopener(filename)
    reopener.reopen()
    return reopener


def install_reopen_handler(reopener: LogReopener, signum: int = signal.SIGUSR1) -> None:
    """Reopen the log file whenever the process receives ``signum``."""

    def _handle(received: int, frame: FrameType | None) -> None:
        logger.info("Got signal %s", signal.Signals(received).name)
        reopener.reopen()

    signal.signal(signum, _handle)
