"""
gdlookup — query the Grim Dawn game database across the base game and its
expansions.

Subpackages
───────────
store  — record databases (extracted .dbr trees, in-memory)
tags   — localized item names, merged across packs
query  — selection, scanning, item lookup and namespace browsing
cli    — the ``gd-lookup`` command
"""

__version__ = "0.1.0"
