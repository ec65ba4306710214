"""Main interactive event loop.

Reads one key at a time and feeds it to the navigation engine, then paints
whatever the engine asks for. Resize notifications are only flagged by the
signal handler; the loop picks them up here, between reads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .input import read_key as default_read_key
from .navigation import NavigationEngine, Redraw
from .render import Renderer
from .terminal import TerminalController

logger = logging.getLogger(__name__)

READ_TIMEOUT_MS = 120


def apply_pending_resize(terminal: TerminalController) -> bool:
    """Re-query geometry if a resize was flagged; return whether it was."""
    if not terminal.consume_resize():
        return False
    geometry = terminal.query_size()
    terminal.apply_scroll_region()
    logger.debug("terminal resized to %sx%s", geometry.cols, geometry.rows)
    return True


def run_main_loop(
    engine: NavigationEngine,
    terminal: TerminalController,
    renderer: Renderer,
    stdin_fd: int,
    read_key: Callable[..., str] = default_read_key,
) -> None:
    """Run until a quit key is pressed.

    The caller is responsible for raw mode; this only reads and paints.
    """
    renderer.full(engine.state)
    while True:
        if apply_pending_resize(terminal):
            renderer.full(engine.state)

        try:
            key = read_key(stdin_fd, timeout_ms=READ_TIMEOUT_MS)
        except KeyboardInterrupt:
            continue
        if key == "":
            continue

        previous = engine.state.selection
        redraw = engine.handle_key(key)
        if redraw is Redraw.QUIT:
            break
        if redraw is Redraw.FULL:
            renderer.full(engine.state)
        elif redraw is Redraw.PARTIAL:
            renderer.partial(engine.state, previous)


__all__ = ["READ_TIMEOUT_MS", "apply_pending_resize", "run_main_loop"]
