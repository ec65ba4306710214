"""Child-process launcher for the editor and shell commands.

Hands the terminal to the child: the TUI is suspended, the program runs in the
requested working directory, and raw mode is re-entered once it exits.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class SuspendableTerminal(Protocol):
    def restore(self) -> None: ...

    def enter_raw_mode(self) -> None: ...


def resolve_executable(name: str, cwd: Path) -> str | None:
    """Locate ``name`` the way the child will: paths relative to ``cwd``."""
    if os.sep in name:
        candidate = name if os.path.isabs(name) else os.path.join(str(cwd), name)
        return shutil.which(candidate)
    return shutil.which(name)


def wait_ignoring_interrupts(child: subprocess.Popen) -> int:
    """Block until ``child`` exits; a SIGINT aimed at us does not cancel it."""
    while True:
        try:
            return child.wait()
        except KeyboardInterrupt:
            logger.debug("interrupt while waiting for pid %s", child.pid)


class ProcessLauncher:
    def __init__(self, terminal: SuspendableTerminal) -> None:
        self.terminal = terminal

    def run(self, cwd: Path, program: str, argument: str | None = None) -> str | None:
        """Run ``program`` (optionally with one argument) in ``cwd`` and wait.

        ``program`` may carry its own flags (``EDITOR="code -w"``). When the
        executable cannot be found the terminal is left untouched. The wait
        outlasts interrupts: Ctrl-C belongs to the child while it runs.
        """
        try:
            cmd = shlex.split(program)
        except ValueError as exc:
            return f"Cannot run {program!r}: {exc}"
        if not cmd:
            return "Cannot run: empty command."
        executable = resolve_executable(cmd[0], cwd)
        if executable is None:
            logger.warning("executable not found: %s", cmd[0])
            return f"Cannot run {cmd[0]}: not found."
        if argument is not None:
            cmd.append(argument)

        self.terminal.restore()
        try:
            child = subprocess.Popen(cmd, executable=executable, cwd=str(cwd))
            returncode = wait_ignoring_interrupts(child)
        except OSError as exc:
            logger.warning("failed to launch %s: %s", cmd[0], exc)
            return f"Failed to launch {cmd[0]}: {exc}"
        finally:
            self.terminal.enter_raw_mode()
        logger.debug("%s exited with status %s", cmd[0], returncode)
        return None


__all__ = ["ProcessLauncher", "SuspendableTerminal", "resolve_executable", "wait_ignoring_interrupts"]
