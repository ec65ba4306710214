"""Terminal control for the browser session.

Owns the saved tty attributes, raw-mode and alternate-screen switching, the
fixed two-row header scroll region, and terminal geometry. Resize signals only
flag a pending re-query; the event loop performs it.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import termios
from collections.abc import Callable
from dataclasses import dataclass

from .errors import TerminalQueryError, TerminalSetupError

logger = logging.getLogger(__name__)

HEADER_ROWS = 2

# Alternate screen, no line wrap, hidden cursor, cleared screen.
ENTER_SEQUENCE = "\x1b[?1049h\x1b[?7l\x1b[?25l\x1b[2J"
# Line wrap back on, cursor shown, scroll region reset, main screen.
RESTORE_SEQUENCE = "\x1b[?7h\x1b[?25h\x1b[;r\x1b[?1049l"


@dataclass(frozen=True)
class TerminalGeometry:
    rows: int
    cols: int


def scroll_region_sequence(rows: int) -> str:
    """Return the sequence pinning rows 1-2 above a scrolling body."""
    return f"\x1b[{HEADER_ROWS + 1};{max(HEADER_ROWS + 1, rows)}r"


class TerminalController:
    """Manage tty attributes, screen-buffer switching and geometry."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.geometry: TerminalGeometry | None = None
        self._saved_tty_state: list | None = None
        self._active = False
        self._resize_pending = False

    @property
    def active(self) -> bool:
        return self._active

    def write(self, text: str) -> None:
        data = text.encode("utf-8", errors="surrogateescape")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def check_tty(self) -> None:
        if not (os.isatty(self.stdin_fd) and os.isatty(self.stdout_fd)):
            raise TerminalSetupError("not connected to a tty")

    def query_size(self) -> TerminalGeometry:
        """Read and remember the current terminal dimensions."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise TerminalQueryError(f"cannot query terminal size: {exc}") from exc
        self.geometry = TerminalGeometry(rows=size.lines, cols=size.columns)
        return self.geometry

    def enter_raw_mode(self) -> None:
        """Switch to character-at-a-time input on the alternate screen.

        The tty attributes are saved on the first call only, so
        re-entering after a child process restores the same state later.
        """
        self.check_tty()
        try:
            if self._saved_tty_state is None:
                self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
            raw = termios.tcgetattr(self.stdin_fd)
            raw[1] &= ~termios.OPOST
            raw[3] &= ~(termios.ECHO | termios.ICANON)
            raw[6][termios.VMIN] = 1
            raw[6][termios.VTIME] = 0
            termios.tcsetattr(self.stdin_fd, termios.TCSANOW, raw)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot set terminal attributes: {exc}") from exc
        self._active = True
        geometry = self.geometry if self.geometry is not None else self.query_size()
        self.write(ENTER_SEQUENCE + scroll_region_sequence(geometry.rows))

    def restore(self) -> None:
        """Undo everything ``enter_raw_mode`` did. Safe to call repeatedly."""
        if not self._active:
            return
        self._active = False
        if self._saved_tty_state is not None:
            try:
                termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            except termios.error:
                logger.exception("failed to restore terminal attributes")
        self.write(RESTORE_SEQUENCE)

    def apply_scroll_region(self) -> None:
        if self.geometry is not None:
            self.write(scroll_region_sequence(self.geometry.rows))

    def on_resize(self, handler: Callable[[], None] | None = None) -> None:
        """Install a ``SIGWINCH`` handler that only flags a pending re-query."""

        def _handle_winch(signum, frame) -> None:
            self._resize_pending = True
            if handler is not None:
                handler()

        signal.signal(signal.SIGWINCH, _handle_winch)

    def consume_resize(self) -> bool:
        """Return whether a resize arrived since the last call, clearing it."""
        pending = self._resize_pending
        self._resize_pending = False
        return pending

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enter_raw_mode()
            yield
        finally:
            self.restore()


__all__ = [
    "ENTER_SEQUENCE",
    "HEADER_ROWS",
    "RESTORE_SEQUENCE",
    "TerminalController",
    "TerminalGeometry",
    "scroll_region_sequence",
]
