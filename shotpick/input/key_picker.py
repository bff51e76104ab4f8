"""Picker keyboard handling.

Maps decoded key tokens onto :class:`~shotpick.picker.PickerSession`
transitions. Bound keys are dispatched before character entry, so a printable
quit key (``Q``) exits instead of being typed into the query.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..picker import PickerSession
from .key_registry import KeyComboBinding, KeyComboRegistry

DEFAULT_QUIT_KEYS: tuple[str, ...] = ("ESC", "CTRL_C")
NEXT_KEYS: tuple[str, ...] = ("TAB", "DOWN")
PREVIOUS_KEYS: tuple[str, ...] = ("SHIFT_TAB", "UP")
CONFIRM_KEYS: tuple[str, ...] = ("ENTER",)


def is_query_char(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def build_picker_key_registry(
    session: PickerSession,
    quit_keys: Iterable[str] = DEFAULT_QUIT_KEYS,
) -> KeyComboRegistry:
    """Bind navigation, edit, confirm and quit tokens to ``session``."""
    registry = KeyComboRegistry()
    registry.register_bindings(
        KeyComboBinding(NEXT_KEYS, session.next),
        KeyComboBinding(PREVIOUS_KEYS, session.previous),
        KeyComboBinding(("BACKSPACE",), session.backspace),
        KeyComboBinding(CONFIRM_KEYS, session.confirm),
    )
    # Registered last so a quit key overrides any other binding for that token.
    registry.register_binding(KeyComboBinding(tuple(quit_keys), session.quit))
    return registry


def handle_picker_key(key: str, session: PickerSession, registry: KeyComboRegistry) -> bool:
    """Apply one key to the session.

    Returns ``True`` when the key changed (or could have changed) picker state
    and ``False`` for ignored keys. ``CandidateSourceError`` raised by the
    session propagates unchanged.
    """
    if session.exited:
        return False
    if registry.dispatch(key):
        return True
    if is_query_char(key):
        session.type_char(key)
        return True
    return False
