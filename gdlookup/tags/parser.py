"""
Item tag table parser.

Tag files map internal tag keys to English display text, one per line::

    # Relics
    tagRelic001=Relic of the Ancients
    tagRelic002={^y}Relic of the Ancients Rare

Blank lines and lines starting with ``#`` or ``//`` are ignored.  Values are
kept verbatim, including colour codes.
"""

from gdlookup.exceptions import TagParseError

__all__ = ["parse_tags"]

_COMMENT_PREFIXES = ("#", "//")


def parse_tags(data: bytes) -> dict[str, str]:
    """
    Parse tag file bytes into ``{tag key: display text}``.

    A later duplicate key replaces an earlier one.

    Raises:
        TagParseError: Content is not UTF-8, or a line has no ``=`` / no key.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise TagParseError(f"Tag file is not valid UTF-8: {exc}") from exc

    tags: dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        key, sep, value = stripped.partition("=")
        key = key.strip()
        if not sep or not key:
            raise TagParseError(f"line {lineno}: expected 'key=value' but got {stripped!r}")
        tags[key] = value
    return tags
