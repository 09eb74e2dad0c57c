"""
Loot tables.

Only the table record itself is shown.  The loot randomizer records that
would supply affixes are collected, but applying them per difficulty or for
vendors is not implemented, so neither option changes the result.
"""

import logging
from collections.abc import Sequence
from enum import Enum

from gdlookup.store.base import AbstractDatabase
from gdlookup.store.models import Record
from .records import find_record
from .scanner import iter_records

__all__ = ["Difficulty", "LOOT_RANDOMIZER_KIND", "collect_loot_randomizers", "loot_table"]

logger = logging.getLogger(__name__)

LOOT_RANDOMIZER_KIND = "LootRandomizer"


class Difficulty(str, Enum):
    NORMAL   = "normal"
    ELITE    = "elite"
    ULTIMATE = "ultimate"


def collect_loot_randomizers(databases: Sequence[AbstractDatabase]) -> list[Record]:
    """Return every record of kind LootRandomizer."""
    return iter_records(databases, lambda _rid, raw: raw.kind == LOOT_RANDOMIZER_KIND)


def loot_table(
    databases: Sequence[AbstractDatabase],
    record_id: str,
    difficulty: Difficulty = Difficulty.ULTIMATE,
    vendor: bool = False,
) -> Record:
    """
    Locate loot table *record_id* as ``show`` does and return it unchanged.

    Raises:
        RecordNotFoundError: No database defines *record_id*.
        DataCorruptionError: A scan hit an unreadable record.
    """
    table = find_record(databases, record_id)
    randomizers = collect_loot_randomizers(databases)
    logger.debug(
        "Collected %d loot randomizer(s) for %s (difficulty=%s, vendor=%s); not applied",
        len(randomizers), record_id, difficulty.value, vendor,
    )
    return table
