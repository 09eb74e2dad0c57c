"""
Install layout of the base game and its expansions.

Every content pack ships its own record database and its own English text
archive. Paths are relative to the install root.

    pack  database                   tag archive                  tag entry
    0     database/database.arz      resources/Text_EN.arc        tags_items.txt
    1     gdx1/database/GDX1.arz     gdx1/resources/Text_EN.arc   tagsgdx1_items.txt
    2     gdx2/database/GDX2.arz     gdx2/resources/Text_EN.arc   tagsgdx2_items.txt
    3     gdx3/database/GDX3.arz     gdx3/resources/Text_EN.arc   tagsgdx3_items.txt
"""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from gdlookup.exceptions import InvalidExpansionError

__all__ = ["Expansion", "PackLayout", "PACKS", "pack_layout"]


class Expansion(IntEnum):
    BASE               = 0
    ASHES_OF_MALMOUTH  = 1
    FORGOTTEN_GODS     = 2
    FANGS_OF_ASTERKARN = 3


@dataclass(frozen=True)
class PackLayout:
    """Where one content pack keeps its database and its item tags."""
    expansion:   Expansion
    database:    str      # record database, relative to the install root
    tag_archive: str      # English text archive, relative to the install root
    tag_entry:   str      # item tag file inside tag_archive

    def database_path(self, install_path: Path) -> Path:
        return Path(install_path) / self.database

    def tag_archive_path(self, install_path: Path) -> Path:
        return Path(install_path) / self.tag_archive


def _layout(expansion: Expansion) -> PackLayout:
    if expansion == Expansion.BASE:
        return PackLayout(
            expansion=expansion,
            database="database/database.arz",
            tag_archive="resources/Text_EN.arc",
            tag_entry="tags_items.txt",
        )
    n = int(expansion)
    return PackLayout(
        expansion=expansion,
        database=f"gdx{n}/database/GDX{n}.arz",
        tag_archive=f"gdx{n}/resources/Text_EN.arc",
        tag_entry=f"tagsgdx{n}_items.txt",
    )


# Ascending pack order; later packs override earlier ones.
PACKS: tuple[PackLayout, ...] = tuple(_layout(e) for e in Expansion)


def pack_layout(index: int) -> PackLayout:
    """
    Return the layout for pack *index*.

    Raises:
        InvalidExpansionError: index is not 0, 1, 2 or 3.
    """
    try:
        return PACKS[Expansion(index)]
    except ValueError as exc:
        raise InvalidExpansionError("xpac must be 0, 1, 2, or 3") from exc
