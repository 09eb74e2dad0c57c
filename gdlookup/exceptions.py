"""
Project-wide custom exception hierarchy.
All modules raise subclasses of GDLookupError — never bare Exception.
"""

__all__ = [
    "GDLookupError",
    "ConfigurationError",
    "InvalidExpansionError",
    "DatabaseUnavailableError",
    "TagTableUnavailableError",
    "DatabaseError",
    "DatabaseOpenError",
    "RecordIdError",
    "RecordResolveError",
    "ArchiveError",
    "ArchiveOpenError",
    "ArchiveEntryError",
    "TagParseError",
    "DataCorruptionError",
    "RecordNotFoundError",
]


class GDLookupError(Exception):
    """Root exception for all gd-lookup errors."""


# ── Configuration ─────────────────────────────────────────────────────────────

class ConfigurationError(GDLookupError):
    """Raised when the install path or pack selection cannot be used."""


class InvalidExpansionError(ConfigurationError):
    """Raised when the expansion index is not 0, 1, 2 or 3."""


class DatabaseUnavailableError(ConfigurationError):
    """Raised when none of the selected databases could be opened."""


class TagTableUnavailableError(ConfigurationError):
    """Raised when no pack provided an item tag table."""


# ── Database handles ──────────────────────────────────────────────────────────

class DatabaseError(GDLookupError):
    """Raised when a record database cannot be read."""


class DatabaseOpenError(DatabaseError):
    """Raised when a path does not reference a readable database (pack absent)."""


class RecordIdError(DatabaseError):
    """Raised when an identifier cannot be derived from a raw record."""


class RecordResolveError(DatabaseError):
    """Raised when a raw record cannot be resolved into its field mapping."""


# ── Text archives / tags ──────────────────────────────────────────────────────

class ArchiveError(GDLookupError):
    """Raised when a text archive cannot be read."""


class ArchiveOpenError(ArchiveError):
    """Raised when a path does not reference a readable archive (pack absent)."""


class ArchiveEntryError(ArchiveError):
    """Raised when a named entry is missing from an opened archive."""


class TagParseError(GDLookupError):
    """Raised when a tag table has malformed content."""


# ── Query engine ──────────────────────────────────────────────────────────────

class DataCorruptionError(GDLookupError):
    """Raised when a scan hits a record that cannot be enumerated, named or resolved."""


class RecordNotFoundError(GDLookupError):
    """Raised when no selected database holds the requested record."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"not found: {record_id}")
        self.record_id = record_id
