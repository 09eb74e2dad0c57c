"""
Predicate scanner — full scans over every selected database.

There is no index: each call enumerates every raw record of every database,
in selection order, and concatenates the results without deduplication.
Any failure to enumerate, name or resolve a record aborts the scan.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from gdlookup.exceptions import DatabaseError, DataCorruptionError
from gdlookup.store.base import AbstractDatabase
from gdlookup.store.models import RawRecord, Record

__all__ = ["Predicate", "iter_records", "iter_record_ids"]

logger = logging.getLogger(__name__)

Predicate = Callable[[str, RawRecord], bool]


def iter_records(
    databases: Iterable[AbstractDatabase],
    predicate: Predicate,
) -> list[Record]:
    """
    Resolve every record whose ``predicate(identifier, raw)`` is true.

    Raises:
        DataCorruptionError: A record could not be enumerated, named or resolved.
    """
    records: list[Record] = []
    for db in databases:
        for rid, raw in _identified(db):
            if not predicate(rid, raw):
                continue
            try:
                records.append(db.resolve(raw))
            except DatabaseError as exc:
                raise DataCorruptionError(f"Error parsing database records: {exc}") from exc
    logger.debug("Scan matched %d record(s)", len(records))
    return records


def iter_record_ids(databases: Iterable[AbstractDatabase]) -> list[str]:
    """
    Return the identifier of every record, without resolving any.

    Raises:
        DataCorruptionError: A record could not be enumerated or named.
    """
    return [rid for db in databases for rid, _ in _identified(db)]


def _identified(db: AbstractDatabase) -> Iterator[tuple[str, RawRecord]]:
    try:
        for raw in db.iter_records():
            yield db.record_id(raw), raw
    except DatabaseError as exc:
        raise DataCorruptionError(f"Error parsing database records: {exc}") from exc
