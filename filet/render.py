"""Screen painting for the browser.

Rows 1-2 hold the header (identity and path, then the status message). The
listing fills rows 3 and below; when it is longer than the screen a viewport
offset keeps the selected entry visible. Every paint is assembled into one
string and written with a single call.
"""

from __future__ import annotations

import unicodedata
from typing import Protocol

from .listing import DirEntry
from .state import NavigationState
from .terminal import HEADER_ROWS, TerminalGeometry
from .ui_theme import DEFAULT_THEME, UITheme

CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_LINE = "\x1b[2K"
EMPTY_MESSAGE = "directory empty"
SELECTED_MARKER = ">  "
UNSELECTED_MARKER = "  "


class Screen(Protocol):
    geometry: TerminalGeometry | None

    def write(self, text: str) -> None: ...


def move_to(row: int, col: int = 1) -> str:
    return f"\x1b[{row};{col}H"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain text to ``max_cols`` display columns.

    Control characters (a newline in a file name, say) are shown as ``?`` so
    they cannot move the cursor.
    """
    out: list[str] = []
    col = 0
    for ch in text:
        if not ch.isprintable():
            ch = "?"
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


class Renderer:
    def __init__(self, screen: Screen, identity: str, theme: UITheme = DEFAULT_THEME) -> None:
        self.screen = screen
        self.identity = identity
        self.theme = theme
        self.top = 0

    def _geometry(self) -> TerminalGeometry:
        if self.screen.geometry is None:
            return TerminalGeometry(rows=24, cols=80)
        return self.screen.geometry

    def visible_rows(self) -> int:
        return max(1, self._geometry().rows - HEADER_ROWS)

    def row_for(self, index: int) -> int:
        """Screen row (1-based) where listing ``index`` is drawn."""
        return HEADER_ROWS + 1 + index - self.top

    def in_viewport(self, index: int) -> bool:
        return self.top <= index < self.top + self.visible_rows()

    def scroll_to(self, selection: int, count: int) -> None:
        visible = self.visible_rows()
        if selection < self.top:
            self.top = selection
        elif selection >= self.top + visible:
            self.top = selection - visible + 1
        self.top = max(0, min(self.top, max(0, count - visible)))

    def draw_line(self, entry: DirEntry, selected: bool) -> str:
        """Return one styled listing line.

        Unselected lines end in a space that overwrites the last character
        left behind by the wider selection marker.
        """
        if selected:
            text = f"{SELECTED_MARKER}{entry.name}"
        else:
            text = f"{UNSELECTED_MARKER}{entry.name} "
        clipped = clip_text(text, self._geometry().cols)
        return f"{self.theme.for_kind(entry.kind)}{clipped}{self.theme.reset}"

    def header(self, state: NavigationState) -> str:
        theme = self.theme
        cols = self._geometry().cols
        identity = clip_text(self.identity, cols)
        path = clip_text(str(state.current_path), max(0, cols - len(identity) - 1))
        return f"{theme.identity}{identity}{theme.reset}:{theme.path}{path}{theme.reset}"

    def status_line(self, state: NavigationState) -> str:
        if not state.status_message:
            return ""
        message = clip_text(state.status_message, self._geometry().cols)
        return f"{self.theme.status_error}{message}{self.theme.reset}"

    def full(self, state: NavigationState) -> None:
        """Repaint the whole screen for ``state``."""
        listing = state.listing
        self.scroll_to(state.selection, len(listing))
        out = [
            CLEAR_SCREEN,
            self.header(state),
            move_to(2),
            self.status_line(state),
        ]
        if not listing:
            theme = self.theme
            out.append(move_to(HEADER_ROWS + 1))
            out.append(f"{theme.empty_marker}{EMPTY_MESSAGE}{theme.empty_marker_end}{theme.reset}")
            out.append(move_to(HEADER_ROWS + 1))
            self.screen.write("".join(out))
            return

        end = min(len(listing), self.top + self.visible_rows())
        for index in range(self.top, end):
            out.append(move_to(self.row_for(index)))
            out.append(self.draw_line(listing[index], index == state.selection))
        out.append(move_to(self.row_for(state.selection)))
        self.screen.write("".join(out))

    def partial(self, state: NavigationState, previous: int) -> None:
        """Redraw only the previously and newly selected lines.

        Falls back to a full repaint when the new selection has left the
        viewport.
        """
        listing = state.listing
        if not listing:
            return
        if not (self.in_viewport(state.selection) and self.in_viewport(previous)):
            self.full(state)
            return
        out: list[str] = []
        if 0 <= previous < len(listing) and previous != state.selection:
            out.append(move_to(self.row_for(previous)))
            out.append(self.draw_line(listing[previous], False))
        out.append(move_to(self.row_for(state.selection)))
        out.append(self.draw_line(listing[state.selection], True))
        out.append(move_to(self.row_for(state.selection)))
        self.screen.write("".join(out))


__all__ = [
    "EMPTY_MESSAGE",
    "Renderer",
    "Screen",
    "char_display_width",
    "clip_text",
    "move_to",
]
