"""Logging setup for the picker process.

One handler on the root logger, writing ``| LEVEL | message`` lines either to
a log file or to stderr. Each line is colored by level with pygments' console
helpers when the stream is a terminal.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from pathlib import Path

from pygments.console import ansiformat

LOG_FORMAT = "| %(levelname)s | %(message)s"

_LEVEL_STYLES: dict[int, str] = {
    logging.DEBUG: "white",
    logging.INFO: "blue",
    logging.WARNING: "yellow",
    logging.ERROR: "*red*",
    logging.CRITICAL: "*red*",
}


class LevelColorFormatter(logging.Formatter):
    """Formatter that colors the whole line by record level."""

    def __init__(self, fmt: str = LOG_FORMAT, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.use_color:
            return line
        style = _LEVEL_STYLES.get(record.levelno, "white")
        return ansiformat(style, line)


def configure_logging(level: str = "INFO", log_file: Path | None = None, *, no_color: bool = False) -> None:
    """Reset root handlers and install the picker's single log handler.

    Safe to call more than once; earlier handlers are removed first.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        use_color = False
    else:
        handler = logging.StreamHandler(sys.stderr)
        use_color = not no_color and sys.stderr.isatty()
    handler.setFormatter(LevelColorFormatter(use_color=use_color))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)


def _writes_to_terminal(handler: logging.Handler) -> bool:
    if isinstance(handler, logging.FileHandler) or not isinstance(handler, logging.StreamHandler):
        return False
    isatty = getattr(handler.stream, "isatty", None)
    return bool(isatty is not None and isatty())


def _drop_record(record: logging.LogRecord) -> bool:
    return False


@contextlib.contextmanager
def terminal_logging_paused():
    """Mute root handlers that write to a terminal until the block exits.

    Raw mode turns off newline translation, so log lines on a tty would tear
    through the picker frame. File handlers keep logging.
    """
    paused = [handler for handler in logging.getLogger().handlers if _writes_to_terminal(handler)]
    for handler in paused:
        handler.addFilter(_drop_record)
    try:
        yield
    finally:
        for handler in paused:
            handler.removeFilter(_drop_record)
