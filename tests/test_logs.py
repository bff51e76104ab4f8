from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path

from pygments.console import ansiformat

from shotpick.logs import LevelColorFormatter, configure_logging, terminal_logging_paused


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("shotpick.test", level, __file__, 1, message, None, None)


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in self._saved_handlers:
            root.addHandler(handler)
        root.setLevel(self._saved_level)

    def test_formatter_plain_output(self) -> None:
        formatter = LevelColorFormatter(use_color=False)

        self.assertEqual(formatter.format(_record(logging.INFO, "App result: 'p0'")), "| INFO | App result: 'p0'")

    def test_formatter_colors_by_level(self) -> None:
        formatter = LevelColorFormatter(use_color=True)

        self.assertEqual(formatter.format(_record(logging.INFO, "hi")), ansiformat("blue", "| INFO | hi"))
        self.assertEqual(formatter.format(_record(logging.WARNING, "hm")), ansiformat("yellow", "| WARNING | hm"))
        self.assertEqual(formatter.format(_record(logging.ERROR, "no")), ansiformat("*red*", "| ERROR | no"))

    def test_configure_logging_to_file_replaces_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "shotpick.log"
            configure_logging("DEBUG", log_file)
            configure_logging("DEBUG", log_file)

            root = logging.getLogger()
            self.assertEqual(len(root.handlers), 1)
            self.assertEqual(root.level, logging.DEBUG)

            logging.getLogger("shotpick.test").debug("written")
            root.handlers[0].flush()
            self.assertEqual(log_file.read_text(encoding="utf-8"), "| DEBUG | written\n")

            root.handlers[0].close()

    def test_terminal_handlers_are_muted_while_paused(self) -> None:
        tty_stream = _TtyStream()
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "shotpick.log"
            configure_logging("INFO", log_file)
            tty_handler = logging.StreamHandler(tty_stream)
            tty_handler.setFormatter(LevelColorFormatter(use_color=False))
            root = logging.getLogger()
            root.addHandler(tty_handler)
            log = logging.getLogger("shotpick.test")

            with terminal_logging_paused():
                log.warning("during")
            log.warning("after")

            for handler in root.handlers:
                handler.flush()
            self.assertEqual(tty_stream.getvalue(), "| WARNING | after\n")
            self.assertEqual(
                log_file.read_text(encoding="utf-8"),
                "| WARNING | during\n| WARNING | after\n",
            )
            self.assertEqual(tty_handler.filters, [])

    def test_unknown_level_falls_back_to_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("nonsense", Path(tmp) / "x.log")
            self.assertEqual(logging.getLogger().level, logging.INFO)
            logging.getLogger().handlers[0].close()


if __name__ == "__main__":
    unittest.main()
