"""
CLI entry point for gd-lookup.

Usage
─────
  # Print one database record
  gd-lookup -i "C:/Games/Grim Dawn" show records/items/materia/compa_aethercrystal.dbr

  # Find the records that define an item, by (part of) its name
  gd-lookup -i "C:/Games/Grim Dawn" item Aether Crystal

  # Browse the record namespace one level at a time
  gd-lookup -i "C:/Games/Grim Dawn" ls records/items

  # Restrict any lookup to one expansion (0 = base game)
  gd-lookup -i "C:/Games/Grim Dawn" -x 2 ls records

The install path may also be given through the GD_INSTALL_PATH environment
variable.  Subcommands are implemented as standalone functions (cmd_show,
cmd_item, cmd_ls, cmd_loot_table) so they can be unit-tested without
invoking argparse.
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import Optional

from gdlookup import __version__
from gdlookup.exceptions import GDLookupError, RecordNotFoundError
from gdlookup.query import (
    Difficulty,
    ItemMatch,
    ItemMatchStatus,
    find_item_references,
    find_record,
    list_children,
    loot_table,
    match_item,
    open_databases,
)
from gdlookup.store.base import AbstractDatabase
from gdlookup.store.models import Record
from gdlookup.tags import load_tag_table

__all__ = [
    "build_parser",
    "cmd_show",
    "cmd_item",
    "cmd_ls",
    "cmd_loot_table",
    "main",
]

logger = logging.getLogger(__name__)

INSTALL_PATH_ENV = "GD_INSTALL_PATH"


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: show | item | ls | loot-table
    """
    parser = argparse.ArgumentParser(
        prog="gd-lookup",
        description="Look up records in the Grim Dawn game database",
    )
    parser.add_argument(
        "-i", "--install-path",
        default=os.environ.get(INSTALL_PATH_ENV),
        metavar="PATH",
        help=f"Path to Grim Dawn installation (default: ${INSTALL_PATH_ENV})",
    )
    parser.add_argument(
        "-x", "--xpac",
        type=int,
        default=None,
        metavar="N",
        help="Restrict lookup to database for nth expansion (0 = base game)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── loot-table ────────────────────────────────────────────────────────
    loot = sub.add_parser("loot-table", help="Show a fully resolved loot table")
    loot.add_argument(
        "-d", "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.ULTIMATE.value,
        help="Difficulty to resolve affixes for (default: ultimate)",
    )
    loot.add_argument(
        "-v", "--vendor",
        action="store_true",
        default=False,
        help="Show vendor affix tables (no modifiers). Overrides difficulty",
    )
    loot.add_argument("path", metavar="RECORD", help="Loot table record path")

    # ── item ──────────────────────────────────────────────────────────────
    item = sub.add_parser(
        "item",
        help="Look up an item by name and list the records it appears in",
    )
    item.add_argument("name", nargs="+", metavar="NAME", help="Item name or words from it")

    # ── ls ────────────────────────────────────────────────────────────────
    ls = sub.add_parser(
        "ls",
        help="Show the next level of the file tree, starting at the provided path",
    )
    ls.add_argument("path", nargs="?", default=None, metavar="PREFIX")

    # ── show ──────────────────────────────────────────────────────────────
    show = sub.add_parser("show", help="Print the specified database record")
    show.add_argument("path", metavar="RECORD", help="Record path")

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_show(databases: Sequence[AbstractDatabase], record_id: str) -> Record:
    """Print record *record_id*; the last database defining it wins."""
    record = find_record(databases, record_id)
    print(record, end="")
    return record


def cmd_item(
    databases: Sequence[AbstractDatabase],
    tags: Mapping[str, str],
    name: str,
) -> ItemMatch:
    """
    Resolve *name* to one item tag and print every item record using it.

    No match and an ambiguous match are reported, not raised.
    """
    match = match_item(tags, name)

    if match.status == ItemMatchStatus.NONE:
        print("No matching items found", file=sys.stderr)
        return match

    if match.status == ItemMatchStatus.AMBIGUOUS:
        print("Multiple item tags found, please disambiguate:")
        for candidate in match.candidates:
            print(f"  {candidate}")
        return match

    references = find_item_references(databases, match.tag)
    print(f"{match.name} is referenced in the following database records:")
    for rid in sorted(references):
        print(f"  {rid}")
    return match


def cmd_ls(databases: Sequence[AbstractDatabase], prefix: Optional[str]) -> list[str]:
    """Print the next namespace level below *prefix*, one label per line."""
    labels = list_children(databases, prefix)
    for label in labels:
        print(label)
    return labels


def cmd_loot_table(
    databases: Sequence[AbstractDatabase],
    record_id: str,
    difficulty: str = Difficulty.ULTIMATE.value,
    vendor: bool = False,
) -> Record:
    """Print loot table *record_id*."""
    record = loot_table(databases, record_id, Difficulty(difficulty), vendor)
    print(record, end="")
    return record


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    if not ns.install_path:
        parser.error(f"--install-path is required (or set {INSTALL_PATH_ENV})")

    try:
        databases = open_databases(ns.install_path, ns.xpac)
        tags = load_tag_table(ns.install_path)

        if ns.subcommand == "show":
            cmd_show(databases, ns.path)
        elif ns.subcommand == "item":
            cmd_item(databases, tags, " ".join(ns.name))
        elif ns.subcommand == "ls":
            cmd_ls(databases, ns.path)
        elif ns.subcommand == "loot-table":
            cmd_loot_table(databases, ns.path, ns.difficulty, ns.vendor)
        else:
            parser.print_help()
    except RecordNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    except GDLookupError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
