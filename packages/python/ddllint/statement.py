"""Whitespace-tolerant keyword search over a single statement's text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# A keyword boundary: whitespace, a statement terminator or end of line
_BOUNDARY = r"(?:\s+|/|$)"


class StatementText:
    """Immutable view over the text of a statement (or a whole script).

    Line breaks are replaced by single spaces once, at construction, so every
    search runs against one logical line.

    Example:
        >>> stmt = StatementText("CREATE   TABLE foo\\n(a int)")
        >>> stmt.contains("create table")
        True
        >>> stmt.next_word("create table")
        'foo'
    """

    __slots__ = ("_value",)

    def __init__(self, text: str) -> None:
        self._value = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")

    @property
    def value(self) -> str:
        """The normalized text."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"StatementText({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatementText):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def contains(self, phrase: str) -> bool:
        """Check whether ``phrase`` occurs in the text.

        Every space in ``phrase`` (and its end) matches one or more
        whitespace characters, a ``/`` or the end of the line. Matching is
        case-insensitive and the phrase may start anywhere, including the
        very beginning of the text. Repeated occurrences are not reported.

        Args:
            phrase: Space-separated keywords, e.g. ``"create table"``.

        Returns:
            True if the phrase is present.
        """
        return self._keyword_pattern(phrase).search(self._value) is not None

    def contains_any(self, phrases: Iterable[str]) -> bool:
        """Check whether at least one of ``phrases`` occurs in the text."""
        return any(self.contains(phrase) for phrase in phrases)

    def next_word(self, phrase: str) -> str | None:
        """Get the first run of non-whitespace characters following ``phrase``.

        Args:
            phrase: Space-separated keywords, e.g. ``"create table"``.

        Returns:
            The word after the phrase, or None if the phrase is absent.
        """
        words = [re.escape(word) for word in phrase.split()]
        if not words:
            return None
        pattern = re.compile(r"\s+".join(words) + r"\s+(\S+)", re.IGNORECASE)
        match = pattern.search(self._value)
        if match is None:
            return None
        return match.group(1)

    @staticmethod
    def _keyword_pattern(phrase: str) -> re.Pattern[str]:
        words = [re.escape(word) for word in phrase.split()]
        return re.compile(_BOUNDARY.join(words) + _BOUNDARY, re.IGNORECASE | re.MULTILINE)
