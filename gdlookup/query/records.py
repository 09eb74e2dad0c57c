"""Exact-identifier record lookup across the selected databases."""

import logging
from collections.abc import Iterable

from gdlookup.exceptions import RecordNotFoundError
from gdlookup.store.base import AbstractDatabase
from gdlookup.store.models import Record
from .scanner import iter_records

__all__ = ["find_record"]

logger = logging.getLogger(__name__)


def find_record(databases: Iterable[AbstractDatabase], record_id: str) -> Record:
    """
    Return the record named *record_id*.

    When several databases define it, a warning is logged and the one from
    the last database in selection order is returned.

    Raises:
        RecordNotFoundError: No database defines *record_id*.
        DataCorruptionError: The scan hit an unreadable record.
    """
    matches = iter_records(databases, lambda rid, _raw: rid == record_id)
    if not matches:
        raise RecordNotFoundError(record_id)
    if len(matches) > 1:
        logger.warning(
            "%d records found for %s; showing latest", len(matches), record_id
        )
    return matches[-1]
