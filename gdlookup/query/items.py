"""
Item lookup — free-text item names to tag keys, tag keys to records.

Key concepts
────────────
ItemMatchStatus  — outcome of matching a query against the tag table
ItemMatch        — the outcome plus the chosen tag or the candidate names
match_item       — token-containment matching with exact-name tie-break
find_item_references — item records whose itemNameTag is a given tag
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gdlookup.store.base import AbstractDatabase
from .scanner import iter_records

__all__ = [
    "ITEMS_PREFIX",
    "ITEM_NAME_FIELD",
    "ItemMatchStatus",
    "ItemMatch",
    "tokenize",
    "match_item",
    "find_item_references",
]

logger = logging.getLogger(__name__)

ITEMS_PREFIX    = "records/items"
ITEM_NAME_FIELD = "itemNameTag"

# ASCII whitespace as used for query splitting: space, \t, \n, \f, \r
_ASCII_WS_RE = re.compile(r"[ \t\n\f\r]+")


class ItemMatchStatus(str, Enum):
    """
    NONE       no tag text contains every query token
    UNIQUE     exactly one tag was selected
    AMBIGUOUS  several tags match and none is named exactly by the query
    """
    NONE      = "none"
    UNIQUE    = "unique"
    AMBIGUOUS = "ambiguous"


@dataclass
class ItemMatch:
    status:     ItemMatchStatus
    tag:        Optional[str] = None     # set when UNIQUE
    name:       Optional[str] = None     # display text of tag, set when UNIQUE
    candidates: list[str] = field(default_factory=list)  # sorted names, set when AMBIGUOUS

    @property
    def is_unique(self) -> bool:
        return self.status == ItemMatchStatus.UNIQUE


def tokenize(query: str) -> list[str]:
    """Split *query* on ASCII whitespace, dropping empty tokens."""
    return [token for token in _ASCII_WS_RE.split(query) if token]


def match_item(tags: Mapping[str, str], query: str) -> ItemMatch:
    """
    Pick the one tag whose display text names the item in *query*.

    A tag is a candidate when every query token is a case-sensitive substring
    of its text, in any order.  Among several candidates, the single one whose
    text equals *query* exactly wins; otherwise the query is ambiguous.
    """
    tokens = tokenize(query)
    candidates = [
        (tag, text) for tag, text in tags.items()
        if all(token in text for token in tokens)
    ]
    logger.debug("Query %r matched %d tag(s)", query, len(candidates))

    if not candidates:
        return ItemMatch(status=ItemMatchStatus.NONE)

    if len(candidates) > 1:
        exact = [(tag, text) for tag, text in candidates if text == query]
        if len(exact) != 1:
            return ItemMatch(
                status=ItemMatchStatus.AMBIGUOUS,
                candidates=sorted(text for _, text in candidates),
            )
        candidates = exact

    tag, text = candidates[0]
    return ItemMatch(status=ItemMatchStatus.UNIQUE, tag=tag, name=text)


def find_item_references(databases: Iterable[AbstractDatabase], tag: str) -> set[str]:
    """
    Return the identifiers of all item records whose itemNameTag is *tag*.

    Identical identifiers from different databases collapse into one entry.

    Raises:
        DataCorruptionError: The scan hit an unreadable record.
    """
    records = iter_records(databases, lambda rid, _raw: rid.startswith(ITEMS_PREFIX))
    return {
        record.id for record in records
        if record.get_string(ITEM_NAME_FIELD) == tag
    }
