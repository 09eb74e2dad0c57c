"""
Tag table loader — merges the item tags of every installed pack.

Packs are read in ascending order and folded with ``dict.update``, so a key
defined by an expansion replaces the base game's text for that key.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from gdlookup.exceptions import ArchiveOpenError, TagTableUnavailableError
from gdlookup.layout import PACKS
from .archive import TextArchive
from .parser import parse_tags

__all__ = ["load_tag_table"]

logger = logging.getLogger(__name__)


def load_tag_table(
    install_path,
    opener: Callable[[Path], TextArchive] = TextArchive.open,
) -> dict[str, str]:
    """
    Load and merge the item tag tables of all installed packs.

    Args:
        install_path: Game install root.
        opener:       Archive opener; raises ArchiveOpenError for absent packs.

    Returns:
        Merged ``{tag key: display text}``.

    Raises:
        TagTableUnavailableError: No pack's text archive could be opened.
        ArchiveEntryError:        An opened archive lacks its tag file.
        TagParseError:            A tag file is malformed.
    """
    install_path = Path(install_path)
    merged: dict[str, str] | None = None

    for pack in PACKS:
        path = pack.tag_archive_path(install_path)
        try:
            archive = opener(path)
        except ArchiveOpenError as exc:
            logger.debug("Skipping tags for pack %d: %s", pack.expansion, exc)
            continue

        tags = parse_tags(archive.get(pack.tag_entry))
        logger.debug("Loaded %d item tags from %s", len(tags), pack.tag_entry)
        if merged is None:
            merged = tags
        else:
            merged.update(tags)

    if merged is None:
        raise TagTableUnavailableError(
            f"Could not read tag files. Please verify install path: {install_path}"
        )
    return merged
