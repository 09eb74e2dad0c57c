"""
query — the lookup engine over a selection of record databases.

Each operation re-scans the selected databases; nothing is indexed or cached
between calls.
"""

from .selection import open_databases
from .scanner import Predicate, iter_records, iter_record_ids
from .records import find_record
from .items import (
    ITEM_NAME_FIELD,
    ITEMS_PREFIX,
    ItemMatch,
    ItemMatchStatus,
    find_item_references,
    match_item,
    tokenize,
)
from .browse import child_labels, list_children
from .loot import LOOT_RANDOMIZER_KIND, Difficulty, collect_loot_randomizers, loot_table

__all__ = [
    "open_databases",
    "Predicate",
    "iter_records",
    "iter_record_ids",
    "find_record",
    "ITEM_NAME_FIELD",
    "ITEMS_PREFIX",
    "ItemMatch",
    "ItemMatchStatus",
    "find_item_references",
    "match_item",
    "tokenize",
    "child_labels",
    "list_children",
    "LOOT_RANDOMIZER_KIND",
    "Difficulty",
    "collect_loot_randomizers",
    "loot_table",
]
