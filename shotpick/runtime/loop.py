"""Main interactive event loop for the picker.

Redraw when dirty, block for one key, apply it, repeat until the session
exits. Candidate-source failures are reported on the status line and the loop
keeps going; the picker state is left as it was before the failing key.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..candidates import CandidateSourceError
from ..input import handle_picker_key
from ..input.key_registry import KeyComboRegistry
from ..picker import PickerSession
from ..render import RenderContext, clamp_list_start, list_view_rows
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``."""

    read_key: Callable[[int | None], str]
    render: Callable[[RenderContext], None]
    terminal_size: Callable[[], tuple[int, int]]


def default_terminal_size(fd: int | None = None) -> tuple[int, int]:
    """Return ``(columns, lines)`` for ``fd``, or for stdout when ``fd`` is None."""
    if fd is not None:
        try:
            size = os.get_terminal_size(fd)
        except OSError:
            pass
        else:
            return size.columns, size.lines
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def run_main_loop(
    session: PickerSession,
    registry: KeyComboRegistry,
    callbacks: RuntimeLoopCallbacks,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Run until the session exits and return its result (the final query)."""
    state = session.state
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    while not session.exited:
        size = callbacks.terminal_size()
        if size != last_size:
            last_size = size
            state.dirty = True
        columns, lines = size

        prev_list_start = state.list_start
        state.list_start = clamp_list_start(
            state.highlight,
            state.list_start,
            list_view_rows(lines),
            len(state.filtered),
        )
        if state.list_start != prev_list_start:
            state.dirty = True

        if state.dirty:
            callbacks.render(
                RenderContext(
                    query=state.query,
                    items=state.filtered,
                    highlight=state.highlight,
                    list_start=state.list_start,
                    width=columns,
                    height=lines,
                    total_candidates=len(state.candidates),
                    status_message=state.status_message,
                    theme=theme,
                )
            )
            state.dirty = False

        try:
            key = callbacks.read_key(KEY_POLL_TIMEOUT_MS)
        except KeyboardInterrupt:
            continue
        if key == "":
            continue
        if skip_next_lf and key == "ENTER_LF":
            skip_next_lf = False
            continue
        if key == "ENTER_CR":
            key = "ENTER"
            skip_next_lf = True
        elif key == "ENTER_LF":
            key = "ENTER"
            skip_next_lf = False
        else:
            skip_next_lf = False

        try:
            handled = handle_picker_key(key, session, registry)
        except CandidateSourceError as exc:
            logger.warning("key %r ignored: %s", key, exc)
            state.status_message = str(exc)
            state.dirty = True
            continue
        if handled and state.status_message:
            state.status_message = ""
            state.dirty = True

    return session.result
