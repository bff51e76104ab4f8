"""Persistent JSON config helpers.

Stores picker preferences: quit keys, refetch policy, theme, log level and a
default candidates file. All access is defensive: malformed or missing config
falls back to defaults key by key.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .input.key_picker import DEFAULT_QUIT_KEYS
from .picker import RefetchPolicy
from .ui_theme import DEFAULT_THEME, normalize_theme_name

CONFIG_ENV_VAR = "SHOTPICK_CONFIG"
LOG_LEVEL_ENV_VAR = "SHOTPICK_LOG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "shotpick.json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class PickerConfig:
    quit_keys: tuple[str, ...] = DEFAULT_QUIT_KEYS
    refetch_policy: RefetchPolicy = RefetchPolicy.ALWAYS
    theme: str = DEFAULT_THEME.name
    log_level: str = DEFAULT_LOG_LEVEL
    candidates_file: Path | None = None


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = path if path is not None else config_path()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def normalize_log_level(name: object) -> str:
    """Return an upper-case stdlib level name, ``INFO`` for anything unknown."""
    if not isinstance(name, str):
        return DEFAULT_LOG_LEVEL
    candidate = name.strip().upper()
    if candidate == "WARN":
        candidate = "WARNING"
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    return DEFAULT_LOG_LEVEL


def _quit_keys(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return DEFAULT_QUIT_KEYS
    keys = tuple(key for key in value if isinstance(key, str) and key)
    return keys or DEFAULT_QUIT_KEYS


def _refetch_policy(value: object) -> RefetchPolicy:
    if not isinstance(value, str):
        return RefetchPolicy.ALWAYS
    try:
        return RefetchPolicy.parse(value)
    except ValueError:
        return RefetchPolicy.ALWAYS


def _candidates_file(value: object) -> Path | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value).expanduser()


def load_picker_config(path: Path | None = None) -> PickerConfig:
    """Build a validated :class:`PickerConfig` from disk and environment.

    ``SHOTPICK_LOG`` overrides the file's ``log_level``.
    """
    data = load_config(path)
    log_level = os.environ.get(LOG_LEVEL_ENV_VAR) or data.get("log_level")
    theme = data.get("theme")
    return PickerConfig(
        quit_keys=_quit_keys(data.get("quit_keys")),
        refetch_policy=_refetch_policy(data.get("refetch_policy")),
        theme=normalize_theme_name(theme if isinstance(theme, str) else None),
        log_level=normalize_log_level(log_level),
        candidates_file=_candidates_file(data.get("candidates_file")),
    )
