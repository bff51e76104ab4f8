"""Rendering for the picker screen.

Composes a full ANSI frame from a :class:`RenderContext` and writes it in one
``os.write``. Layout, top to bottom: centered header, help line, query row,
results title, the scrolling result list and a reverse-video status line.
Rendering never mutates picker state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import clip_ansi_line, display_width, pad_ansi_line
from .filtering import substring_index
from .selection import clamp_highlight
from .ui_theme import DEFAULT_THEME, UITheme

HEADER_TEXT = " shotpick "
HELP_TEXT = "type to filter  Tab/Down next  Shift-Tab/Up prev  Esc quit"
QUERY_LABEL = "Search text: "
QUERY_PLACEHOLDER = "type to filter"
RESULTS_TITLE = "> Results"
EMPTY_MESSAGE = " no matches"

# header, help, query, results title, status
CHROME_ROWS = 5


@dataclass
class RenderContext:
    query: str
    items: list[str]
    highlight: int
    list_start: int
    width: int
    height: int
    total_candidates: int = 0
    status_message: str = ""
    theme: UITheme = DEFAULT_THEME


def list_view_rows(height: int) -> int:
    """Rows available to the result list for a terminal ``height``."""
    return max(1, height - CHROME_ROWS)


def clamp_list_start(highlight: int, list_start: int, visible_rows: int, total: int) -> int:
    """Scroll offset that keeps ``highlight`` inside the visible window."""
    rows = max(1, visible_rows)
    if highlight < list_start:
        list_start = highlight
    elif highlight >= list_start + rows:
        list_start = highlight - rows + 1
    return max(0, min(list_start, max(0, total - rows)))


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + theme.reset


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def highlight_query_match(item: str, query: str, theme: UITheme) -> str:
    """Color the first occurrence of ``query`` inside ``item``."""
    idx = substring_index(query, item) if query else None
    if idx is None:
        return _styled(theme.item_text, item, theme)
    end = idx + len(query)
    return (
        _styled(theme.item_text, item[:idx], theme)
        + _styled(theme.item_match, item[idx:end], theme)
        + _styled(theme.item_text, item[end:], theme)
    )


def _centered(text: str, width: int) -> str:
    gap = max(0, width - display_width(text))
    return " " * (gap // 2) + text


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _query_row(query: str, theme: UITheme) -> str:
    label = _styled(theme.query_label, QUERY_LABEL, theme)
    if query:
        return label + _styled(theme.query_text, query, theme)
    return label + _styled(theme.query_placeholder, QUERY_PLACEHOLDER, theme)


def build_frame(context: RenderContext) -> str:
    """Return the complete frame for ``context`` as one escape-coded string."""
    theme = context.theme
    width = max(1, context.width)
    rows: list[str] = [
        _styled(theme.header, _centered(HEADER_TEXT, width), theme),
        _styled(theme.help_dim, _centered(HELP_TEXT, width), theme),
        _query_row(context.query, theme),
        _styled(theme.results_title, RESULTS_TITLE, theme),
    ]

    items = context.items
    visible_rows = list_view_rows(context.height)
    highlight = clamp_highlight(context.highlight, len(items))
    list_start = clamp_list_start(highlight, context.list_start, visible_rows, len(items))
    for row in range(visible_rows):
        item_idx = list_start + row
        if item_idx < len(items):
            text = (
                _styled(theme.item_index, f"{item_idx}: ", theme)
                + highlight_query_match(items[item_idx], context.query, theme)
            )
            text = clip_ansi_line(text, width)
            if item_idx == highlight:
                text = selected_with_ansi(pad_ansi_line(text, width), theme)
            rows.append(text)
        elif row == 0 and not items:
            rows.append(_styled(theme.empty_message, EMPTY_MESSAGE, theme))
        else:
            rows.append("")

    left_status = f" {len(items)}/{context.total_candidates} matches"
    if context.status_message:
        left_status += f"  {context.status_message}"
    status = build_status_line(left_status, width)

    out: list[str] = ["\033[H"]
    for text in rows:
        out.append(pad_ansi_line(text, width))
        if "\033" in text:
            out.append("\033[0m")
        out.append("\r\n")
    out.append(theme.reverse)
    out.append(status)
    out.append("\033[0m")
    return "".join(out)


def render_frame(context: RenderContext, fd: int) -> None:
    os.write(fd, build_frame(context).encode("utf-8", errors="replace"))
