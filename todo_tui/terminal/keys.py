"""
keys.py - Key decoder
Single responsibility: turn the terminal byte stream into logical keys.

Screens only ever see ``Key`` members or one-character strings; escape
sequence parsing, partial reads and UTF-8 reassembly stay in this module.
"""

import enum
import logging
import os
import select
from typing import Callable, Union

from todo_tui.config import ESC_SEQUENCE_TIMEOUT

logger = logging.getLogger(__name__)


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    SHIFT_TAB = "shift_tab"
    BACKSPACE = "backspace"
    CTRL_C = "ctrl_c"
    IGNORED = "ignored"


LogicalKey = Union[Key, str]

# read(timeout) -> bytes; b"" means nothing arrived (timeout or end of input)
Reader = Callable[[Union[float, None]], bytes]

ESC = 0x1B

_CONTROL_KEYS = {
    0x0D: Key.ENTER,
    0x0A: Key.ENTER,
    0x09: Key.TAB,
    0x7F: Key.BACKSPACE,
    0x08: Key.BACKSPACE,
    0x03: Key.CTRL_C,
}

# final byte of CSI / SS3 sequences
_SEQUENCE_KEYS = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
}

_MAX_SEQUENCE_LEN = 32


def _utf8_length(lead: int) -> int:
    """Expected byte length of a UTF-8 sequence, 0 for an invalid lead byte."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def digit_value(key) -> int | None:
    """Value of an ASCII digit key; None for anything else, including other Unicode digits."""
    if isinstance(key, str) and len(key) == 1 and "0" <= key <= "9":
        return int(key)
    return None


class KeyDecoder:
    def __init__(self, read: Reader, esc_timeout: float = ESC_SEQUENCE_TIMEOUT, eof_key: LogicalKey = Key.CTRL_C):
        self._read = read
        self.esc_timeout = esc_timeout
        self.eof_key = eof_key
        self._pending = bytearray()
        self._eof = False

    @classmethod
    def for_fd(cls, fd: int, **kwargs) -> "KeyDecoder":
        """Decoder reading straight from a file descriptor with select() timeouts."""

        def read(timeout):
            if timeout is not None:
                ready, _, _ = select.select([fd], [], [], timeout)
                if not ready:
                    return b""
            return os.read(fd, 1024)

        return cls(read, **kwargs)

    @property
    def pending(self) -> bytes:
        return bytes(self._pending)

    def _fill(self, timeout: float | None) -> bool:
        chunk = self._read(timeout)
        if chunk:
            self._pending.extend(chunk)
            return True
        if timeout is None:
            self._eof = True
        return False

    def _take(self, count: int) -> bytes:
        data = bytes(self._pending[:count])
        del self._pending[:count]
        return data

    def next_key(self) -> LogicalKey:
        """Block until one logical key is available and return it."""
        while not self._pending:
            if self._eof:
                return self.eof_key
            self._fill(None)

        lead = self._pending[0]
        if lead == ESC:
            return self._decode_escape()
        if lead in _CONTROL_KEYS:
            self._take(1)
            return _CONTROL_KEYS[lead]
        if lead < 0x20:
            self._take(1)
            return Key.IGNORED
        if lead < 0x80:
            return self._take(1).decode("ascii")
        return self._decode_utf8(lead)

    def _decode_escape(self) -> LogicalKey:
        if len(self._pending) == 1 and not self._fill(self.esc_timeout):
            self._take(1)
            return Key.ESCAPE

        introducer = self._pending[1]
        if introducer == ord("O"):
            return self._decode_ss3()
        if introducer != ord("["):
            # not a sequence: the escape stands alone, the next byte stays queued
            self._take(1)
            return Key.ESCAPE

        index = 2
        while True:
            while index >= len(self._pending):
                if not self._fill(self.esc_timeout):
                    dropped = self._take(len(self._pending))
                    logger.debug("Incomplete escape sequence dropped: %r", dropped)
                    return Key.IGNORED
            byte = self._pending[index]
            if 0x40 <= byte <= 0x7E:
                break
            if not 0x20 <= byte <= 0x3F or index >= _MAX_SEQUENCE_LEN:
                dropped = self._take(index)
                logger.debug("Malformed escape sequence dropped: %r", dropped)
                return Key.IGNORED
            index += 1

        sequence = self._take(index + 1)
        final = sequence[-1]
        if final == ord("Z"):
            return Key.SHIFT_TAB
        return _SEQUENCE_KEYS.get(final, Key.IGNORED)

    def _decode_ss3(self) -> LogicalKey:
        while len(self._pending) < 3:
            if not self._fill(self.esc_timeout):
                self._take(len(self._pending))
                return Key.IGNORED
        sequence = self._take(3)
        return _SEQUENCE_KEYS.get(sequence[2], Key.IGNORED)

    def _decode_utf8(self, lead: int) -> LogicalKey:
        length = _utf8_length(lead)
        if length == 0:
            self._take(1)
            return Key.IGNORED
        while len(self._pending) < length:
            if not self._fill(self.esc_timeout):
                break
        raw = bytes(self._pending[:length])
        try:
            char = raw.decode("utf-8")
        except UnicodeDecodeError:
            self._take(1)
            return Key.IGNORED
        self._take(length)
        return char
