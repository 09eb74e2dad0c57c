"""
DbrDatabase — reads a record database extracted to ``.dbr`` text files.

The game's ArchiveTool extracts ``X.arz`` into a directory tree of ``.dbr``
files, one per record, with template defaults already merged in.  Each file
is a list of ``key,value,`` lines; array values are ``;``-separated::

    templateName,database/templates/itemrelic.tpl,
    Class,ItemRelic,
    itemNameTag,tagCompA001,
    augmentSkillLevel1,1;1;2;2,

The record identifier is the file path relative to the extraction root,
e.g. ``records/items/materia/compa_aethercrystal.dbr``.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from gdlookup.exceptions import (
    DatabaseError,
    DatabaseOpenError,
    RecordIdError,
    RecordResolveError,
)
from .base import AbstractDatabase
from .models import FieldValue, RawRecord, Record

__all__ = ["DbrDatabase", "parse_dbr"]

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────

_DBR_GLOB    = "*.dbr"
_CLASS_FIELD = "Class"

_INT_RE   = re.compile(r"^-?\d+$")
_FLOAT_RE = re.compile(r"^-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?$")


class DbrDatabase(AbstractDatabase):
    """
    Record database backed by an extracted ``.dbr`` tree.

    Usage::

        db = DbrDatabase.open("C:/Games/Grim Dawn/database/database.arz")
        for raw in db.iter_records():
            print(db.record_id(raw))
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self.source = str(self._root)

    @classmethod
    def open(cls, path) -> "DbrDatabase":
        """
        Open the extracted tree for database *path*.

        *path* may be the extraction directory itself or the ``.arz`` file
        it was extracted from, in which case the sibling directory with the
        same stem is used.

        Raises:
            DatabaseOpenError: Neither location is a directory.
        """
        path = Path(path)
        for candidate in (path, path.with_suffix("")):
            if candidate.is_dir():
                logger.debug("Opened extracted database %s", candidate)
                return cls(candidate)
        raise DatabaseOpenError(f"No extracted database found for {path}")

    # ── AbstractDatabase ──────────────────────────────────────────────────────

    def iter_records(self) -> Iterator[RawRecord]:
        try:
            files = sorted(self._root.rglob(_DBR_GLOB))
        except OSError as exc:
            raise DatabaseError(f"Cannot list {self._root}: {exc}") from exc

        for file in files:
            try:
                text = file.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                raise DatabaseError(f"Cannot read {file}: {exc}") from exc
            lines = text.splitlines()
            yield RawRecord(
                name=file.relative_to(self._root).as_posix(),
                kind=_find_class(lines),
                payload=lines,
            )

    def record_id(self, raw: RawRecord) -> str:
        if not raw.name:
            raise RecordIdError(f"Record in {self.source} has no name")
        return raw.name

    def resolve(self, raw: RawRecord) -> Record:
        try:
            data = parse_dbr(raw.payload or [])
        except ValueError as exc:
            raise RecordResolveError(f"{raw.name}: {exc}") from exc
        return Record(id=self.record_id(raw), kind=raw.kind, data=data)


# ── .dbr parsing ──────────────────────────────────────────────────────────────


def parse_dbr(lines: list[str]) -> dict[str, FieldValue]:
    """
    Decode ``key,value,`` lines into a typed field mapping.

    Blank lines are skipped.  A later duplicate key replaces an earlier one.

    Raises:
        ValueError: A non-blank line has no ``,`` or an empty key.
    """
    data: dict[str, FieldValue] = {}
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        key, sep, rest = line.partition(",")
        if not sep or not key:
            raise ValueError(f"line {lineno}: expected 'key,value,' but got {line!r}")
        if rest.endswith(","):
            rest = rest[:-1]
        data[key] = _decode_value(rest)
    return data


def _decode_value(text: str) -> FieldValue:
    if ";" in text:
        return [_decode_scalar(part) for part in text.split(";")]
    return _decode_scalar(text)


def _decode_scalar(text: str) -> FieldValue:
    if _INT_RE.match(text):
        return int(text)
    if _FLOAT_RE.match(text):
        return float(text)
    return text


def _find_class(lines: list[str]) -> str:
    """Return the ``Class`` value without decoding the whole record."""
    prefix = _CLASS_FIELD + ","
    for line in lines:
        line = line.strip()
        if line.startswith(prefix):
            return line[len(prefix):].rstrip(",")
    return ""
