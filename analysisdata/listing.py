"""Directory listing utilities."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


logger = logging.getLogger(__name__)


class ListingKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class ListingEntry:
    name: str
    kind: ListingKind
    # Modification time in seconds, set for files only.
    modified: float | None = None


@dataclass(frozen=True)
class DirectoryListing:
    path: Path
    entries: tuple[ListingEntry, ...]

    @classmethod
    def from_path(cls, path: str | Path) -> "DirectoryListing":
        """List the immediate entries of ``path``, sorted by name.

        Raises ``OSError`` when the directory cannot be read.
        """
        root_path = Path(path)
        entries: list[ListingEntry] = []

        with os.scandir(root_path) as scan:
            for entry in scan:
                listed = _entry_for(entry)
                if listed is not None:
                    entries.append(listed)

        entries.sort(key=lambda item: item.name)
        return cls(path=root_path, entries=tuple(entries))

    @property
    def files(self) -> tuple[ListingEntry, ...]:
        return tuple(entry for entry in self.entries if entry.kind is ListingKind.FILE)


def _entry_for(entry: os.DirEntry) -> ListingEntry | None:
    if entry.is_file():
        # The file may be replaced or removed between the scan and the stat.
        try:
            modified = entry.stat().st_mtime
        except OSError as exc:
            logger.warning("Skipping listing entry %s: %s", entry.path, exc)
            return None
        return ListingEntry(name=entry.name, kind=ListingKind.FILE, modified=modified)
    if entry.is_dir():
        return ListingEntry(name=entry.name, kind=ListingKind.DIRECTORY)
    return ListingEntry(name=entry.name, kind=ListingKind.OTHER)
