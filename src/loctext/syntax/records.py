"""In-memory data model for parsed localization text.

TextRecord is one entry of the format: a text id plus an ordered mapping
of locale code to value. PragmaTable holds the file-scoped directives.
ParseResult bundles both together with the recoverable diagnostics of one
parse call.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from loctext.diagnostics import Diagnostic

__all__ = ["ParseResult", "PragmaTable", "TextRecord"]

PragmaTable: TypeAlias = dict[str, str]
"""Pragma key -> pragma value, collected once per parse (file-scoped)."""


@dataclass(slots=True, eq=False)
class TextRecord:
    """One localized text entry.

    Locale order is significant: it is the order the serializer writes and
    the order the resolver's first-entry fallback uses. Equality therefore
    compares locales as an ordered sequence, not as a plain dict.

    A record with no locales is valid; resolving it yields "".

    Example:
        >>> record = TextRecord("GREETING", {"en": "Hello", "tr": "Merhaba"})
        >>> record["tr"]
        'Merhaba'
        >>> "de" in record
        False
    """

    id: str
    locales: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Own a private copy so records stay value-like.
        self.locales = dict(self.locales)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextRecord):
            return NotImplemented
        return self.id == other.id and list(self.locales.items()) == list(
            other.locales.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.locales)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Iterate (locale, value) pairs in stored order."""
        return iter(self.locales.items())

    def __contains__(self, locale: object) -> bool:
        return locale in self.locales

    def __getitem__(self, locale: str) -> str:
        return self.locales[locale]

    def has_locale(self, locale: str) -> bool:
        """Check if a value exists for the exact locale code."""
        return locale in self.locales

    @property
    def first_locale(self) -> str | None:
        """First locale code in insertion order, or None if empty."""
        return next(iter(self.locales), None)

    @property
    def string_size(self) -> int:
        """Approximate size: total length of all locale codes and values."""
        return sum(len(k) + len(v) for k, v in self.locales.items())

    def copy(self) -> TextRecord:
        """Return an independent copy."""
        return TextRecord(self.id, self.locales)

    @classmethod
    def from_pairs(cls, text_id: str, pairs: Mapping[str, str] | list[tuple[str, str]]) -> TextRecord:
        """Build a record from a mapping or a list of (locale, value) pairs."""
        return cls(text_id, dict(pairs))


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of one TextParser.parse() call.

    Attributes:
        records: Records in file order (duplicate ids preserved)
        pragmas: Pragma table for this source
        warnings: Recoverable problems (skipped lines, duplicates)
    """

    records: tuple[TextRecord, ...]
    pragmas: PragmaTable
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True if parsing produced no warnings."""
        return not self.warnings
