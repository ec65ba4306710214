"""Runtime configuration read once from the process environment.

filet keeps no configuration file. Programs and the home directory come from
``EDITOR``, ``SHELL`` and ``HOME``; the user and host names only decorate the
status line.
"""

from __future__ import annotations

import getpass
import os
import socket
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "filet"
DEFAULT_EDITOR = "vi"
DEFAULT_SHELL = "/bin/sh"
DEFAULT_HOME = "/"
LOG_FILENAME = "filet.log"


def _env_or(environ: Mapping[str, str], name: str, fallback: str) -> str:
    """Return ``environ[name]`` unless it is unset or blank."""
    value = environ.get(name, "").strip()
    return value if value else fallback


def _current_user(environ: Mapping[str, str]) -> str:
    try:
        return getpass.getuser()
    except Exception:
        pass
    for name in ("USER", "LOGNAME"):
        value = environ.get(name, "").strip()
        if value:
            return value
    return "?"


def _current_hostname() -> str:
    try:
        return socket.gethostname() or "?"
    except OSError:
        return "?"


def default_log_path() -> Path:
    """Return the log file location inside the platform user-log directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


@dataclass(frozen=True)
class Config:
    """Values the browser needs from its environment."""

    editor: str = DEFAULT_EDITOR
    shell: str = DEFAULT_SHELL
    home: Path = Path(DEFAULT_HOME)
    user: str = "?"
    hostname: str = "?"

    @property
    def identity(self) -> str:
        return f"{self.user}@{self.hostname}"

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build config from ``environ`` (defaults to ``os.environ``).

        Blank values are treated like missing ones so ``EDITOR=`` still
        falls back to ``vi``.
        """
        if environ is None:
            environ = os.environ
        home = os.path.abspath(_env_or(environ, "HOME", DEFAULT_HOME))
        return cls(
            editor=_env_or(environ, "EDITOR", DEFAULT_EDITOR),
            shell=_env_or(environ, "SHELL", DEFAULT_SHELL),
            home=Path(home),
            user=_current_user(environ),
            hostname=_current_hostname(),
        )


__all__ = [
    "APP_NAME",
    "Config",
    "DEFAULT_EDITOR",
    "DEFAULT_HOME",
    "DEFAULT_SHELL",
    "default_log_path",
]
