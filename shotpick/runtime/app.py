"""Picker bootstrap: compose session, terminal and loop, then run."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..candidates import CandidateSource
from ..input import DEFAULT_QUIT_KEYS, build_picker_key_registry, read_key
from ..logs import terminal_logging_paused
from ..picker import PickerSession, RefetchPolicy
from ..render import RenderContext, render_frame
from ..terminal import TerminalController, open_tty
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, default_terminal_size, run_main_loop

logger = logging.getLogger(__name__)


def run_picker(
    source: CandidateSource,
    *,
    refetch_policy: RefetchPolicy | str = RefetchPolicy.ALWAYS,
    quit_keys: Iterable[str] = DEFAULT_QUIT_KEYS,
    theme_name: str | None = None,
    no_color: bool = False,
) -> str:
    """Run the interactive picker on the controlling tty.

    The candidate source is read once before the terminal switches to raw
    mode, so a failing source surfaces as ``CandidateSourceError`` with the
    terminal untouched. Returns the query typed at the moment of quitting.
    """
    session = PickerSession(source, refetch_policy=refetch_policy)
    registry = build_picker_key_registry(session, quit_keys)
    theme = resolve_theme(theme_name, no_color=no_color)

    with open_tty() as tty_fd:
        terminal = TerminalController(stdin_fd=tty_fd, stdout_fd=tty_fd)

        def render(context: RenderContext) -> None:
            render_frame(context, terminal.stdout_fd)

        callbacks = RuntimeLoopCallbacks(
            read_key=lambda timeout_ms: read_key(tty_fd, timeout_ms=timeout_ms),
            render=render,
            terminal_size=lambda: default_terminal_size(tty_fd),
        )
        logger.info("Entering raw mode..")
        with terminal.raw_mode(), terminal_logging_paused():
            result = run_main_loop(session, registry, callbacks, theme=theme)

    logger.info("App result: %r", result)
    logger.info("Exiting cleanly...")
    return result
