"""Exception types raised by the terminal layer.

Both are fatal at startup; ``cli.main`` reports them after the terminal has
been restored.
"""

from __future__ import annotations


class FiletError(Exception):
    """Base class for filet failures."""


class TerminalSetupError(FiletError):
    """Raised when the process has no usable interactive terminal."""


class TerminalQueryError(FiletError):
    """Raised when terminal geometry cannot be queried."""


__all__ = [
    "FiletError",
    "TerminalSetupError",
    "TerminalQueryError",
]
