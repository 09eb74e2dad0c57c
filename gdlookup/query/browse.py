"""
Namespace browser — directory-style listing over flat record identifiers.

Identifiers look like paths (``records/items/materia/compa_x.dbr``) but the
databases store them flat.  Children of a prefix are derived by splitting
identifiers into segments; no tree is built.
"""

from collections.abc import Iterable
from typing import Optional

from gdlookup.store.base import AbstractDatabase
from .scanner import iter_record_ids

__all__ = ["SEPARATOR", "child_labels", "list_children"]

SEPARATOR = "/"


def _segments(path: str) -> list[str]:
    return [part for part in path.split(SEPARATOR) if part]


def child_labels(identifiers: Iterable[str], prefix: Optional[str] = None) -> list[str]:
    """
    Return the sorted, distinct next-level labels below *prefix*.

    The prefix matches whole segments only: ``records/it`` is not a parent
    of ``records/items/a``.  A label that has further segments below it ends
    with ``/``.  An identifier equal to the prefix yields nothing.
    """
    base = _segments(prefix) if prefix else []
    depth = len(base)

    labels: set[str] = set()
    for rid in identifiers:
        parts = _segments(rid)
        if parts[:depth] != base:
            continue
        rest = parts[depth:]
        if not rest:
            continue
        labels.add(rest[0] + SEPARATOR if len(rest) > 1 else rest[0])
    return sorted(labels)


def list_children(
    databases: Iterable[AbstractDatabase],
    prefix: Optional[str] = None,
) -> list[str]:
    """
    List the next level of the record namespace below *prefix*, across all
    *databases*.

    Raises:
        DataCorruptionError: A record identifier could not be derived.
    """
    return child_labels(iter_record_ids(databases), prefix)
