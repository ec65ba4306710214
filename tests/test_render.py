"""Tests for full and partial screen painting."""

from __future__ import annotations

import unittest
from pathlib import Path

from filet.listing import DirEntry, EntryKind
from filet.render import Renderer, clip_text
from filet.state import NavigationState
from filet.terminal import TerminalGeometry
from filet.ui_theme import DEFAULT_THEME, PLAIN_THEME


class _FakeScreen:
    def __init__(self, rows: int = 24, cols: int = 80) -> None:
        self.geometry = TerminalGeometry(rows=rows, cols=cols)
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)


def _state(names: list[str], selection: int = 0) -> NavigationState:
    listing = tuple(DirEntry(name, EntryKind.REGULAR) for name in names)
    return NavigationState(current_path=Path("/tmp/proj"), selection=selection, listing=listing)


class DrawLineTests(unittest.TestCase):
    def test_selected_and_unselected_markers(self) -> None:
        renderer = Renderer(_FakeScreen(), "me@box", PLAIN_THEME)
        entry = DirEntry("notes.txt", EntryKind.REGULAR)

        self.assertEqual(renderer.draw_line(entry, True), ">  notes.txt")
        self.assertEqual(renderer.draw_line(entry, False), "  notes.txt ")
        self.assertEqual(len(renderer.draw_line(entry, True)), len(renderer.draw_line(entry, False)))

    def test_kind_colors(self) -> None:
        renderer = Renderer(_FakeScreen(), "me@box", DEFAULT_THEME)

        self.assertTrue(renderer.draw_line(DirEntry("d", EntryKind.DIRECTORY), False).startswith("\033[34;1m"))
        self.assertTrue(renderer.draw_line(DirEntry("s", EntryKind.SYMLINK), False).startswith("\033[36;1m"))
        self.assertTrue(
            renderer.draw_line(DirEntry("s", EntryKind.SYMLINK_TO_DIRECTORY), False).startswith("\033[36;1m")
        )
        self.assertTrue(renderer.draw_line(DirEntry("x", EntryKind.EXECUTABLE), False).startswith("\033[32;1m"))
        self.assertTrue(renderer.draw_line(DirEntry("r", EntryKind.REGULAR), False).startswith("\033[0m"))

    def test_lines_are_clipped_to_terminal_width(self) -> None:
        renderer = Renderer(_FakeScreen(cols=6), "me@box", PLAIN_THEME)

        self.assertEqual(renderer.draw_line(DirEntry("abcdefgh", EntryKind.REGULAR), True), ">  abc")

    def test_clip_text_handles_control_and_wide_characters(self) -> None:
        self.assertEqual(clip_text("a\nb", 10), "a?b")
        self.assertEqual(clip_text("日本語", 5), "日本")


class FullRenderTests(unittest.TestCase):
    def test_full_render_paints_header_entries_and_cursor(self) -> None:
        screen = _FakeScreen()
        renderer = Renderer(screen, "me@box", PLAIN_THEME)

        renderer.full(_state(["a", "b"], selection=1))

        (output,) = screen.writes
        self.assertTrue(output.startswith("\x1b[2J\x1b[H"))
        self.assertIn("me@box:/tmp/proj", output)
        self.assertIn("\x1b[3;1H  a ", output)
        self.assertIn("\x1b[4;1H>  b", output)
        self.assertTrue(output.endswith("\x1b[4;1H"))

    def test_empty_listing_shows_marker(self) -> None:
        screen = _FakeScreen()
        renderer = Renderer(screen, "me@box", DEFAULT_THEME)

        renderer.full(_state([]))

        self.assertIn("\033[31;7mdirectory empty\033[27m", screen.writes[0])

    def test_status_message_is_drawn_on_second_row(self) -> None:
        screen = _FakeScreen()
        renderer = Renderer(screen, "me@box", PLAIN_THEME)
        state = _state(["a"])
        state.status_message = "Cannot delete a: Permission denied"

        renderer.full(state)

        self.assertIn("\x1b[2;1HCannot delete a: Permission denied", screen.writes[0])

    def test_only_visible_rows_are_painted(self) -> None:
        screen = _FakeScreen(rows=5)
        renderer = Renderer(screen, "me@box", PLAIN_THEME)
        names = [f"f{i}" for i in range(10)]

        renderer.full(_state(names, selection=9))

        output = screen.writes[0]
        self.assertEqual(renderer.top, 7)
        self.assertNotIn("f6", output)
        self.assertIn("\x1b[3;1H  f7 ", output)
        self.assertIn("\x1b[5;1H>  f9", output)
        self.assertTrue(output.endswith("\x1b[5;1H"))


class PartialRenderTests(unittest.TestCase):
    def test_partial_redraws_exactly_two_lines(self) -> None:
        screen = _FakeScreen()
        renderer = Renderer(screen, "me@box", PLAIN_THEME)
        state = _state(["a", "b", "c"])
        renderer.full(state)
        screen.writes.clear()

        state.selection = 2
        renderer.partial(state, previous=0)

        (output,) = screen.writes
        self.assertEqual(output, "\x1b[3;1H  a \x1b[5;1H>  c\x1b[5;1H")

    def test_partial_scrolls_with_full_repaint_when_leaving_viewport(self) -> None:
        screen = _FakeScreen(rows=4)
        renderer = Renderer(screen, "me@box", PLAIN_THEME)
        state = _state(["a", "b", "c"])
        renderer.full(state)
        state.selection = 1
        renderer.partial(state, previous=0)
        screen.writes.clear()

        state.selection = 2
        renderer.partial(state, previous=1)

        (output,) = screen.writes
        self.assertTrue(output.startswith("\x1b[2J"))
        self.assertEqual(renderer.top, 1)
        self.assertIn("\x1b[4;1H>  c", output)

    def test_bottom_jump_uses_current_geometry(self) -> None:
        screen = _FakeScreen(rows=30)
        renderer = Renderer(screen, "me@box", PLAIN_THEME)
        names = [f"f{i:02d}" for i in range(40)]
        state = _state(names)
        renderer.full(state)

        screen.geometry = TerminalGeometry(rows=12, cols=80)
        state.selection = 39
        renderer.partial(state, previous=0)

        self.assertEqual(renderer.top, 30)
        self.assertTrue(screen.writes[-1].endswith("\x1b[12;1H"))


if __name__ == "__main__":
    unittest.main()
