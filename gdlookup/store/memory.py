"""MemoryDatabase — a synthetic in-process database built from plain dicts."""

from collections.abc import Iterator, Mapping

from gdlookup.exceptions import RecordIdError, RecordResolveError
from .base import AbstractDatabase
from .models import FieldValue, RawRecord, Record

__all__ = ["MemoryDatabase"]


class MemoryDatabase(AbstractDatabase):
    """
    Database whose records are given up front as ``{identifier: fields}``.

    The record kind is taken from the ``Class`` field, as for extracted
    databases.  Records are enumerated in insertion order.

    Usage::

        db = MemoryDatabase({
            "records/items/a.dbr": {"Class": "ItemRelic", "itemNameTag": "t1"},
        })
    """

    def __init__(
        self,
        records: Mapping[str, Mapping[str, FieldValue]],
        source: str = "<memory>",
    ) -> None:
        self._records = {rid: dict(fields) for rid, fields in records.items()}
        self.source = source

    def iter_records(self) -> Iterator[RawRecord]:
        for rid, fields in self._records.items():
            kind = fields.get("Class", "")
            yield RawRecord(
                name=rid,
                kind=kind if isinstance(kind, str) else "",
                payload=fields,
            )

    def record_id(self, raw: RawRecord) -> str:
        if not raw.name:
            raise RecordIdError(f"Record in {self.source} has no name")
        return raw.name

    def resolve(self, raw: RawRecord) -> Record:
        if not isinstance(raw.payload, Mapping):
            raise RecordResolveError(f"{raw.name}: payload is not a field mapping")
        return Record(id=self.record_id(raw), kind=raw.kind, data=dict(raw.payload))
