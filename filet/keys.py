"""Key bindings.

Maps key tokens from ``filet.input.read_key`` to browser actions. Arrow keys
and Enter alias the single-letter vi bindings.
"""

from __future__ import annotations

import enum


class Action(enum.Enum):
    UP_DIR = "up_dir"
    ENTER = "enter"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    HOME = "home"
    ROOT = "root"
    TOGGLE_HIDDEN = "toggle_hidden"
    REFRESH = "refresh"
    SPAWN_SHELL = "spawn_shell"
    EDIT = "edit"
    DELETE = "delete"
    QUIT = "quit"


KEY_BINDINGS: dict[str, Action] = {
    "h": Action.UP_DIR,
    "l": Action.ENTER,
    "j": Action.MOVE_DOWN,
    "k": Action.MOVE_UP,
    "g": Action.JUMP_TOP,
    "G": Action.JUMP_BOTTOM,
    "~": Action.HOME,
    "/": Action.ROOT,
    ".": Action.TOGGLE_HIDDEN,
    "r": Action.REFRESH,
    "s": Action.SPAWN_SHELL,
    "e": Action.EDIT,
    "x": Action.DELETE,
    "q": Action.QUIT,
    "LEFT": Action.UP_DIR,
    "RIGHT": Action.ENTER,
    "ENTER": Action.ENTER,
    "DOWN": Action.MOVE_DOWN,
    "UP": Action.MOVE_UP,
}

# Actions that address the selected entry and so need a non-empty listing.
SELECTION_ACTIONS = frozenset(
    {
        Action.ENTER,
        Action.MOVE_DOWN,
        Action.MOVE_UP,
        Action.JUMP_TOP,
        Action.JUMP_BOTTOM,
        Action.EDIT,
        Action.DELETE,
    }
)


def action_for_key(key: str) -> Action | None:
    """Return the bound action, or ``None`` for unbound keys."""
    return KEY_BINDINGS.get(key)


__all__ = ["Action", "KEY_BINDINGS", "SELECTION_ACTIONS", "action_for_key"]
