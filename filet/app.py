"""Wire terminal, model, engine, renderer and loop into one browser session."""

from __future__ import annotations

import atexit
import logging
import sys
from pathlib import Path

from .config import Config
from .launcher import ProcessLauncher
from .loop import run_main_loop
from .navigation import NavigationEngine, normalize_path
from .render import Renderer
from .state import NavigationState
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)


def build_engine(config: Config, start_path: Path, terminal: TerminalController) -> NavigationEngine:
    state = NavigationState(current_path=normalize_path(start_path))
    engine = NavigationEngine(state, config, ProcessLauncher(terminal))
    engine.refresh()
    return engine


def run_browser(config: Config, start_path: Path, no_color: bool = False) -> None:
    """Run the interactive browser on ``start_path`` until the user quits.

    Raises ``TerminalSetupError``/``TerminalQueryError`` when the terminal is
    unusable; by then the terminal has already been restored.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    terminal.check_tty()
    terminal.query_size()
    terminal.on_resize()
    # Covers exit paths that bypass the raw_mode() context manager.
    atexit.register(terminal.restore)

    engine = build_engine(config, start_path, terminal)
    renderer = Renderer(terminal, config.identity, resolve_theme(no_color=no_color))
    logger.info("browsing %s", engine.state.current_path)
    with terminal.raw_mode():
        run_main_loop(engine, terminal, renderer, stdin_fd)


__all__ = ["build_engine", "run_browser"]
