"""Abstract base class for all record databases."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .models import RawRecord, Record

__all__ = ["AbstractDatabase"]


class AbstractDatabase(ABC):
    """
    One opened record database (a single content pack).

    The query engine only talks to this interface; decoding the on-disk
    format and merging templates into a record are backend concerns.
    Concrete backends provide an ``open(path)`` classmethod that raises
    DatabaseOpenError when *path* is not a database they can read.
    """

    #: Human-readable origin, used in log messages.
    source: str = "<unknown>"

    @abstractmethod
    def iter_records(self) -> Iterable[RawRecord]:
        """
        Enumerate every raw record in the database.

        Raises:
            DatabaseError: The database is structurally corrupt.
        """

    @abstractmethod
    def record_id(self, raw: RawRecord) -> str:
        """
        Derive the slash-delimited identifier of *raw* without resolving it.

        Raises:
            RecordIdError: No identifier can be derived.
        """

    @abstractmethod
    def resolve(self, raw: RawRecord) -> Record:
        """
        Produce the fully merged field mapping of *raw*.

        Raises:
            RecordResolveError: The record content is malformed.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"
