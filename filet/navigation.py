"""Navigation state machine.

``NavigationEngine.handle_key`` interprets one key against the current state
and reports how much of the screen needs repainting. Any transition that may
change the directory contents is "stale": selection resets to the top and the
listing is re-read.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable
from pathlib import Path

from .config import Config
from .keys import SELECTION_ACTIONS, Action, action_for_key
from .launcher import ProcessLauncher
from .listing import DirEntry, EntryKind, Listing, read_directory
from .state import NavigationState

logger = logging.getLogger(__name__)

ROOT_PATH = Path("/")


class Redraw(enum.Enum):
    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"
    QUIT = "quit"


def normalize_path(path: str | Path) -> Path:
    """Return an absolute, lexically normalized path (symlinks kept)."""
    return Path(os.path.abspath(os.fspath(path)))


def parent_path(path: Path) -> Path:
    """Parent of ``path``; the root is its own parent."""
    return normalize_path(path).parent


def delete_entry(directory: Path, entry: DirEntry) -> str | None:
    """Remove ``entry`` from ``directory``; return an error message on failure.

    Only real directories are removed with ``rmdir``; symlinks to directories
    are unlinked like files.
    """
    target = directory / entry.name
    try:
        if entry.kind is EntryKind.DIRECTORY:
            os.rmdir(target)
        else:
            os.unlink(target)
    except OSError as exc:
        logger.warning("failed to delete %s: %s", target, exc)
        return f"Cannot delete {entry.name}: {exc.strerror or exc}"
    logger.info("deleted %s", target)
    return None


class NavigationEngine:
    def __init__(
        self,
        state: NavigationState,
        config: Config,
        launcher: ProcessLauncher,
        read_listing: Callable[[Path, bool], Listing] = read_directory,
        delete: Callable[[Path, DirEntry], str | None] = delete_entry,
    ) -> None:
        self.state = state
        self.config = config
        self.launcher = launcher
        self.read_listing = read_listing
        self.delete = delete

    def refresh(self, message: str | None = None) -> Redraw:
        """Reset selection, re-read the current directory and ask for a full repaint."""
        state = self.state
        state.selection = 0
        state.listing = self.read_listing(state.current_path, state.show_hidden)
        state.status_message = message or ""
        return Redraw.FULL

    def _select(self, index: int) -> Redraw:
        state = self.state
        index = max(0, min(index, len(state.listing) - 1))
        if index == state.selection:
            return Redraw.NONE
        state.selection = index
        return Redraw.PARTIAL

    def _change_directory(self, path: Path) -> Redraw:
        self.state.current_path = normalize_path(path)
        return self.refresh()

    def handle_key(self, key: str) -> Redraw:
        action = action_for_key(key)
        if action is None:
            return Redraw.NONE
        return self.dispatch(action)

    def dispatch(self, action: Action) -> Redraw:
        state = self.state
        if action is Action.QUIT:
            return Redraw.QUIT
        if action is Action.UP_DIR:
            return self._change_directory(parent_path(state.current_path))
        if action is Action.HOME:
            return self._change_directory(self.config.home)
        if action is Action.ROOT:
            return self._change_directory(ROOT_PATH)
        if action is Action.TOGGLE_HIDDEN:
            state.show_hidden = not state.show_hidden
            return self.refresh()
        if action is Action.REFRESH:
            return self.refresh()
        if action is Action.SPAWN_SHELL:
            error = self.launcher.run(state.current_path, self.config.shell)
            return self.refresh(error)

        if action in SELECTION_ACTIONS and not state.listing:
            return Redraw.NONE
        entry = state.listing[state.selection]

        if action is Action.MOVE_DOWN:
            return self._select(state.selection + 1)
        if action is Action.MOVE_UP:
            return self._select(state.selection - 1)
        if action is Action.JUMP_TOP:
            return self._select(0)
        if action is Action.JUMP_BOTTOM:
            return self._select(len(state.listing) - 1)
        if action is Action.ENTER:
            if not entry.kind.is_traversable:
                return Redraw.NONE
            return self._change_directory(state.current_path / entry.name)
        if action is Action.EDIT:
            error = self.launcher.run(state.current_path, self.config.editor, entry.name)
            return self.refresh(error)
        if action is Action.DELETE:
            error = self.delete(state.current_path, entry)
            return self.refresh(error)
        return Redraw.NONE


__all__ = [
    "NavigationEngine",
    "ROOT_PATH",
    "Redraw",
    "delete_entry",
    "normalize_path",
    "parent_path",
]
