"""UI palettes.

A theme maps entry kinds and header parts to ANSI styles. ``PLAIN_THEME`` is
used with ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    identity: str
    path: str
    status_error: str
    empty_marker: str
    empty_marker_end: str
    directory: str
    symlink: str
    executable: str
    regular: str

    def for_kind(self, kind: EntryKind) -> str:
        if kind is EntryKind.DIRECTORY:
            return self.directory
        if kind in (EntryKind.SYMLINK, EntryKind.SYMLINK_TO_DIRECTORY):
            return self.symlink
        if kind is EntryKind.EXECUTABLE:
            return self.executable
        return self.regular


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    identity="\033[32;1m",
    path="\033[34;1m",
    status_error="\033[31;1m",
    empty_marker="\033[31;7m",
    empty_marker_end="\033[27m",
    directory="\033[34;1m",
    symlink="\033[36;1m",
    executable="\033[32;1m",
    regular="\033[0m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    identity="",
    path="",
    status_error="",
    empty_marker="",
    empty_marker_end="",
    directory="",
    symlink="",
    executable="",
    regular="",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return the concrete theme for the requested color mode."""
    return PLAIN_THEME if no_color else DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]
