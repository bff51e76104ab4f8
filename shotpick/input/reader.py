"""Low-level terminal input decoding.

Reads raw bytes from the tty and translates them into normalized key tokens.
Handles ESC-sequence timing and multi-byte UTF-8 characters.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\x15": "CTRL_U",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_CSI_FINAL_TOKENS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"Z": "SHIFT_TAB",
    b"H": "HOME",
    b"F": "END",
}

_SS3_FINAL_TOKENS: dict[bytes, str] = {
    **_CSI_FINAL_TOKENS,
    b"P": "F1",
    b"Q": "F2",
    b"R": "F3",
    b"S": "F4",
}

_CSI_TILDE_TOKENS: dict[bytes, str] = {
    b"1": "HOME",
    b"2": "INSERT",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}

# Token for complete escape sequences this reader does not name.
UNKNOWN_SEQUENCE = "ESC_SEQ"
_CSI_MAX_LENGTH = 16


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_sequence_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_utf8_char(fd: int, lead: bytes) -> str:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    raw = bytearray(lead)
    for _ in range(_utf8_sequence_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        raw.extend(part)
    return raw.decode("utf-8", errors="replace")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses without input or the stream is
    closed. Printable input comes back as the character itself; everything
    else as an upper-case token such as ``"BACKSPACE"`` or ``"SHIFT_TAB"``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _decode_utf8_char(fd, ch)
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    prefix = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if prefix is None:
        return "ESC"
    if prefix == b"[":
        return _read_csi(fd)
    if prefix == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _SS3_FINAL_TOKENS.get(final, UNKNOWN_SEQUENCE)
    _PENDING_BYTES.append(prefix)
    return "ESC"


def _read_csi(fd: int) -> str:
    """Consume the rest of ``ESC [`` up to its final byte and name the key.

    Sequences that are not recognized come back as ``UNKNOWN_SEQUENCE`` so
    they can never be mistaken for a lone escape.
    """
    params = bytearray()
    first = True
    while len(params) < _CSI_MAX_LENGTH:
        ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if ch is None:
            return "ESC" if first else UNKNOWN_SEQUENCE
        first = False
        code = ch[0]
        if 0x20 <= code <= 0x3F:
            params.extend(ch)
            continue
        if 0x40 <= code <= 0x7E:
            if ch == b"~":
                return _CSI_TILDE_TOKENS.get(bytes(params), UNKNOWN_SEQUENCE)
            if params:
                return UNKNOWN_SEQUENCE
            return _CSI_FINAL_TOKENS.get(ch, UNKNOWN_SEQUENCE)
        # Not part of a CSI sequence; hand it back as the next key.
        _PENDING_BYTES.append(ch)
        return UNKNOWN_SEQUENCE
    return UNKNOWN_SEQUENCE
