"""
Store set manager — opens the databases selected for this invocation.

Expansions that are not installed are expected: a database that fails to
open is dropped, and only an empty selection is an error.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from gdlookup.exceptions import DatabaseOpenError, DatabaseUnavailableError
from gdlookup.layout import PACKS, pack_layout
from gdlookup.store.base import AbstractDatabase
from gdlookup.store.dbr import DbrDatabase

__all__ = ["open_databases"]

logger = logging.getLogger(__name__)


def open_databases(
    install_path,
    xpac: Optional[int] = None,
    opener: Callable[[Path], AbstractDatabase] = DbrDatabase.open,
) -> list[AbstractDatabase]:
    """
    Open the databases of all packs, or only of pack *xpac*.

    Args:
        install_path: Game install root.
        xpac:         Restrict to this pack index (0 = base game); None = all.
        opener:       Database opener; raises DatabaseOpenError for absent packs.

    Returns:
        Opened databases in ascending pack order (never empty).

    Raises:
        InvalidExpansionError:    xpac is not 0, 1, 2 or 3.
        DatabaseUnavailableError: None of the selected databases opened.
    """
    install_path = Path(install_path)
    packs = PACKS if xpac is None else (pack_layout(xpac),)

    databases: list[AbstractDatabase] = []
    for pack in packs:
        path = pack.database_path(install_path)
        try:
            databases.append(opener(path))
        except DatabaseOpenError as exc:
            logger.debug("Skipping database for pack %d: %s", pack.expansion, exc)

    if not databases:
        raise DatabaseUnavailableError(
            f"Could not read database files. Please verify install path: {install_path}"
        )
    logger.debug("Selected %d database(s): %s", len(databases), databases)
    return databases
