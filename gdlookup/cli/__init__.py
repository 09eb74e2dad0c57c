"""
cli — command-line interface for gd-lookup.

Entry points
────────────
  python -m gdlookup   (via gdlookup/__main__.py)
  gd-lookup            (via pyproject.toml [project.scripts])

Subcommands: show | item | ls | loot-table
"""

from gdlookup.cli.main import build_parser, cmd_item, cmd_loot_table, cmd_ls, cmd_show, main

__all__ = ["build_parser", "cmd_show", "cmd_item", "cmd_ls", "cmd_loot_table", "main"]
