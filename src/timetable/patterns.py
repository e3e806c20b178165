"""Structural text matching over the portal's HTML fragments.

The timetable markup is hand-authored and has no schema, so every field is
located with its own small regular expression instead of a DOM query. A
pattern that finds nothing is a normal outcome: callers read an absent
capture as "field not present" and move on.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """One pattern hit with its capture groups."""

    text: str
    groups: tuple[str | None, ...]
    start: int
    end: int

    def group(self, index: int) -> str | None:
        """Return capture ``index`` (1-based), or None when it did not take part."""
        if index == 0:
            return self.text
        if 0 < index <= len(self.groups):
            return self.groups[index - 1]
        return None

    def stripped(self, index: int) -> str:
        """Capture ``index`` with surrounding whitespace removed, "" when absent."""
        return (self.group(index) or "").strip()


class Pattern:
    """A compiled structural pattern.

    Args:
        regex: Regular expression with capture groups for the wanted content.
        multiline: Let ``.`` cross line breaks (tables and rows span lines).
        ignore_case: Case-insensitive matching, for keyword enumerations.
    """

    def __init__(
        self, regex: str, *, multiline: bool = False, ignore_case: bool = False
    ) -> None:
        flags = 0
        if multiline:
            flags |= re.DOTALL
        if ignore_case:
            flags |= re.IGNORECASE
        self._regex = re.compile(regex, flags)

    @property
    def regex(self) -> str:
        return self._regex.pattern

    def finditer(self, text: str) -> Iterator[Match]:
        """Lazily yield matches in document order."""
        for m in self._regex.finditer(text):
            yield Match(text=m.group(0), groups=m.groups(), start=m.start(), end=m.end())

    def findall(self, text: str) -> list[Match]:
        return list(self.finditer(text))

    def first(self, text: str) -> Match | None:
        return next(self.finditer(text), None)

    def last(self, text: str) -> Match | None:
        found = None
        for found in self.finditer(text):
            pass
        return found

    def count(self, text: str) -> int:
        return sum(1 for _ in self._regex.finditer(text))

    def __repr__(self) -> str:
        return f"Pattern({self._regex.pattern!r})"


def collapse_whitespace(text: str) -> str:
    """Fold line breaks into single spaces and trim the ends."""
    return re.sub(r"\s*\n\s*", " ", text).strip()
