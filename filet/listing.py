"""Directory enumeration and entry classification.

``read_directory`` is total: unreadable directories produce an empty listing
and entries that cannot be stat'ed are left out.
"""

from __future__ import annotations

import enum
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SYMLINK_TO_DIRECTORY = "symlink_to_directory"
    EXECUTABLE = "executable"
    REGULAR = "regular"

    @property
    def is_traversable(self) -> bool:
        """Whether ``enter`` may descend into an entry of this kind."""
        return self in (EntryKind.DIRECTORY, EntryKind.SYMLINK_TO_DIRECTORY)


@dataclass(frozen=True)
class DirEntry:
    """One listing row: a base name and its kind, fixed at read time."""

    name: str
    kind: EntryKind


Listing = tuple[DirEntry, ...]


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def classify(mode: int, path: str | Path) -> EntryKind:
    """Return the kind for an entry whose ``lstat`` mode is ``mode``.

    Symlinks are re-stat'ed through the link to tell directory targets apart.
    """
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        try:
            target_mode = os.stat(path).st_mode
        except OSError:
            return EntryKind.SYMLINK
        if stat.S_ISDIR(target_mode):
            return EntryKind.SYMLINK_TO_DIRECTORY
        return EntryKind.SYMLINK
    if stat.S_ISREG(mode) and mode & stat.S_IXUSR:
        return EntryKind.EXECUTABLE
    return EntryKind.REGULAR


def listing_sort_key(entry: DirEntry) -> tuple[bool, bytes]:
    """Traversable entries first, then byte-wise name order."""
    return (not entry.kind.is_traversable, os.fsencode(entry.name))


def read_directory(path: str | Path, show_hidden: bool) -> Listing:
    """List ``path`` as sorted ``DirEntry`` rows.

    The ``os.scandir`` handle is closed before returning; entry names are
    plain strings, so the listing stays valid afterwards.
    """
    entries: list[DirEntry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                name = child.name
                if not show_hidden and is_hidden(name):
                    continue
                try:
                    mode = child.stat(follow_symlinks=False).st_mode
                except OSError:
                    continue
                entries.append(DirEntry(name=name, kind=classify(mode, child.path)))
    except OSError as exc:
        logger.debug("cannot read directory %s: %s", path, exc)
        return ()

    entries.sort(key=listing_sort_key)
    return tuple(entries)


__all__ = [
    "DirEntry",
    "EntryKind",
    "Listing",
    "classify",
    "is_hidden",
    "listing_sort_key",
    "read_directory",
]
