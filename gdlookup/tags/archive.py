"""
TextArchive — reads a text archive extracted to a directory.

ArchiveTool extracts ``Text_EN.arc`` into a directory of plain text files
(``tags_items.txt``, ``tagsgdx1_items.txt``, …).  Entries are looked up by
file name relative to that directory.
"""

import logging
from pathlib import Path

from gdlookup.exceptions import ArchiveEntryError, ArchiveOpenError

__all__ = ["TextArchive"]

logger = logging.getLogger(__name__)


class TextArchive:
    """
    Read-only access to the entries of one extracted archive.

    Usage::

        arc = TextArchive.open("C:/Games/Grim Dawn/resources/Text_EN.arc")
        data = arc.get("tags_items.txt")
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self.source = str(self._root)

    @classmethod
    def open(cls, path) -> "TextArchive":
        """
        Open archive *path*: the extraction directory itself, or the ``.arc``
        file next to a directory with the same stem.

        Raises:
            ArchiveOpenError: Neither location is a directory.
        """
        path = Path(path)
        for candidate in (path, path.with_suffix("")):
            if candidate.is_dir():
                logger.debug("Opened extracted archive %s", candidate)
                return cls(candidate)
        raise ArchiveOpenError(f"No extracted archive found for {path}")

    def get(self, name: str) -> bytes:
        """
        Return the raw bytes of entry *name*.

        Raises:
            ArchiveEntryError: The entry does not exist or cannot be read.
        """
        entry = self._root / name
        try:
            return entry.read_bytes()
        except OSError as exc:
            raise ArchiveEntryError(f"{name} not found in {self.source}: {exc}") from exc

    def __repr__(self) -> str:
        return f"TextArchive({self.source!r})"
