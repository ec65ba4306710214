from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .listing import DirEntry


@dataclass
class NavigationState:
    current_path: Path
    show_hidden: bool = False
    selection: int = 0
    listing: tuple[DirEntry, ...] = field(default_factory=tuple)
    status_message: str = ""

    @property
    def selected_entry(self) -> DirEntry | None:
        if not self.listing:
            return None
        return self.listing[self.selection]
