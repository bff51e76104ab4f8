"""Input-layer public API for key decoding and picker key dispatch."""

from .key_picker import DEFAULT_QUIT_KEYS, build_picker_key_registry, handle_picker_key, is_query_char
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_SEQUENCE, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_SEQUENCE",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_QUIT_KEYS",
    "build_picker_key_registry",
    "handle_picker_key",
    "is_query_char",
]
