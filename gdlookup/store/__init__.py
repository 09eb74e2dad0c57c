"""
store — record databases, one per installed content pack.

Public API
──────────
RawRecord         — record as enumerated, before resolution
Record            — resolved record (identifier, class, typed fields)
AbstractDatabase  — interface the query engine scans
DbrDatabase       — database extracted to .dbr text files
MemoryDatabase    — synthetic database built from dicts
"""

from gdlookup.store.models import FieldValue, RawRecord, Record
from gdlookup.store.base import AbstractDatabase
from gdlookup.store.dbr import DbrDatabase, parse_dbr
from gdlookup.store.memory import MemoryDatabase

__all__ = [
    "FieldValue",
    "RawRecord",
    "Record",
    "AbstractDatabase",
    "DbrDatabase",
    "parse_dbr",
    "MemoryDatabase",
]
