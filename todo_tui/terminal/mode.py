"""
mode.py - Terminal mode manager
Single responsibility: acquire raw mode once and always give it back.

Capability probes, in order:
  1. termios.tcgetattr() on the descriptor
  2. the stream's own isatty()
  3. ``stty raw -echo`` tried on the descriptor, then the ``stty -g`` settings restored
When every probe fails the caller gets ``None`` and runs line-buffered.
"""

import atexit
import logging
import os
import signal
import subprocess
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import termios
    import tty

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"

_TERMIOS_ERRORS = (OSError, ValueError) if _IS_WINDOWS else (termios.error, OSError, ValueError)


@dataclass
class ModeHandle:
    fd: int
    out: TextIO
    saved_attrs: list | None = None  # termios attributes
    saved_stty: str | None = None  # ``stty -g`` output when termios was unusable
    released: bool = False


def _stty(fd: int, *args: str) -> str:
    result = subprocess.run(
        ["stty", *args],
        stdin=fd,
        capture_output=True,
        text=True,
        check=True,
        timeout=5,
    )
    return result.stdout.strip()


def _probe_termios(fd: int) -> bool:
    if _IS_WINDOWS:
        return False
    try:
        termios.tcgetattr(fd)
    except _TERMIOS_ERRORS:
        return False
    return True


def _probe_stream(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _probe_stty(fd: int) -> bool:
    """Try raw mode through ``stty`` and put the saved settings straight back."""
    try:
        saved = _stty(fd, "-g")
        if not saved:
            return False
        try:
            _stty(fd, "raw", "-echo")
        finally:
            _stty(fd, saved)
    except (OSError, subprocess.SubprocessError):
        return False
    return True


def probe_tty(fd: int, stream: TextIO | None = None) -> bool:
    """True when ``fd`` is an interactive terminal we can put into raw mode."""
    if _probe_termios(fd):
        return True
    if _probe_stream(stream if stream is not None else sys.stdin):
        return True
    return _probe_stty(fd)


def acquire(fd: int, out: TextIO, stream: TextIO | None = None) -> ModeHandle | None:
    """Switch ``fd`` to raw mode; return None when the terminal cannot do it."""
    if not probe_tty(fd, stream):
        logger.warning("fd %s is not an interactive terminal; using line-buffered input", fd)
        return None

    handle = ModeHandle(fd=fd, out=out)
    try:
        if _probe_termios(fd):
            handle.saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd, termios.TCSANOW)
        else:
            handle.saved_stty = _stty(fd, "-g")
            _stty(fd, "raw", "-echo")
    except (*_TERMIOS_ERRORS, subprocess.SubprocessError) as e:
        logger.warning("Could not enter raw mode on fd %s: %s", fd, e)
        return None

    out.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
    out.flush()
    logger.info("Raw terminal mode acquired on fd %s", fd)
    return handle


def release(handle: ModeHandle | None) -> None:
    """Restore the saved terminal settings. Safe to call more than once."""
    if handle is None or handle.released:
        return
    handle.released = True
    try:
        if handle.saved_attrs is not None:
            termios.tcsetattr(handle.fd, termios.TCSADRAIN, handle.saved_attrs)
        elif handle.saved_stty:
            _stty(handle.fd, handle.saved_stty)
    except (*_TERMIOS_ERRORS, subprocess.SubprocessError) as e:
        logger.error("Failed to restore terminal settings: %s; falling back to stty sane", e)
        try:
            _stty(handle.fd, "sane")
        except (OSError, subprocess.SubprocessError):
            logger.exception("stty sane failed")
    try:
        handle.out.write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        handle.out.flush()
    except (OSError, ValueError):
        logger.warning("Could not reset cursor state on exit", exc_info=True)
    logger.info("Terminal mode restored on fd %s", handle.fd)


def _install_signal_handlers(handle: ModeHandle) -> dict:
    def _on_signal(signum, frame):
        release(handle)
        if signum == signal.SIGINT:
            raise KeyboardInterrupt
        raise SystemExit(128 + signum)

    previous = {}
    for name in ("SIGTERM", "SIGHUP", "SIGINT"):
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        try:
            previous[signum] = signal.signal(signum, _on_signal)
        except (ValueError, OSError):
            # only the main thread may install handlers
            logger.debug("Cannot install handler for %s", name)
    return previous


@contextmanager
def terminal_mode(fd: int, out: TextIO, stream: TextIO | None = None) -> Iterator[ModeHandle | None]:
    """Hold raw mode for the body; restore it on return, error, signal or interpreter exit."""
    handle = acquire(fd, out, stream)
    if handle is None:
        yield None
        return

    atexit.register(release, handle)
    previous = _install_signal_handlers(handle)
    try:
        yield handle
    finally:
        release(handle)
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)
        atexit.unregister(release)
