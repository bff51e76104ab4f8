"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker chrome: header, help line, query row,
result list and status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reverse: str
    reset: str
    header: str
    help_dim: str
    query_label: str
    query_text: str
    query_placeholder: str
    results_title: str
    item_index: str
    item_text: str
    item_match: str
    empty_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1m",
    help_dim="\033[2;38;5;250m",
    query_label="\033[1m",
    query_text="\033[1;33m",
    query_placeholder="\033[2;38;5;250m",
    results_title="\033[1;37m",
    item_index="\033[2;38;5;250m",
    item_text="\033[38;5;252m",
    item_match="\033[1;38;5;81m",
    empty_message="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    help_dim="\033[2;38;5;110m",
    query_label="\033[1;38;5;39m",
    query_text="\033[1;38;5;153m",
    query_placeholder="\033[2;38;5;110m",
    results_title="\033[1;38;5;45m",
    item_index="\033[2;38;5;73m",
    item_text="\033[38;5;252m",
    item_match="\033[1;38;5;215m",
    empty_message="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="\033[7m",
    reset="\033[0m",
    header="",
    help_dim="",
    query_label="",
    query_text="",
    query_placeholder="",
    results_title="",
    item_index="",
    item_text="",
    item_match="",
    empty_message="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
