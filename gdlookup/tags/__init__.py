"""
tags — localized item names, merged across installed packs.

Public API
──────────
TextArchive     — extracted text archive, entries looked up by name
parse_tags      — parse one ``key=value`` tag file
load_tag_table  — merge the tag files of every installed pack
"""

from gdlookup.tags.archive import TextArchive
from gdlookup.tags.parser import parse_tags
from gdlookup.tags.loader import load_tag_table

__all__ = ["TextArchive", "parse_tags", "load_tag_table"]
