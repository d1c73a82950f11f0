"""Split a DDL script into statements."""

from __future__ import annotations

#: Terminator placed between statements of a script
STATEMENT_TERMINATOR = "/"


def split_script(text: str) -> list[str]:
    """Split a script on ``/`` into trimmed, non-blank statements.

    Statements keep their relative order. Segments that are empty once
    leading and trailing whitespace is removed are dropped.

    Example:
        >>> split_script("CREATE TABLE a (x int) /\\n\\n/ DROP TABLE a /")
        ['CREATE TABLE a (x int)', 'DROP TABLE a']
    """
    segments = (segment.strip() for segment in text.split(STATEMENT_TERMINATOR))
    return [segment for segment in segments if segment]
