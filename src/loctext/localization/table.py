"""TextTable: ordered, id-unique collection of text records.

The parser preserves duplicate ids as they appear in a file; a TextTable is
the collection that enforces uniqueness and offers lookup by id. It also
carries the file's pragma table so a table can be written back whole.

Thread Safety:
    Not synchronized. Build a table once and share it read-only, or guard
    mutations externally.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from loctext.constants import DEFAULT_LOCALE, FALLBACK_MISSING_TEXT
from loctext.diagnostics import DuplicateTextIdError, ErrorTemplate
from loctext.runtime.resolver import ResolutionContext, resolve
from loctext.syntax.parser import TextParser
from loctext.syntax.records import PragmaTable, TextRecord
from loctext.syntax.serializer import serialize

__all__ = ["TextTable"]

logger = logging.getLogger(__name__)


class TextTable:
    """Ordered collection of TextRecords keyed by unique text id.

    Example:
        >>> table = TextTable.from_source('HELLO => en="Hello", tr="Merhaba"')
        >>> table.lookup("HELLO", "tr")
        'Merhaba'
        >>> "HELLO" in table
        True
    """

    __slots__ = ("_by_id", "_records", "pragmas")

    def __init__(
        self,
        records: Iterable[TextRecord] = (),
        pragmas: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize table.

        Args:
            records: Initial records; ids must be unique
            pragmas: Pragma table to carry along (copied)

        Raises:
            DuplicateTextIdError: If two records share an id
        """
        self._records: list[TextRecord] = []
        self._by_id: dict[str, TextRecord] = {}
        self.pragmas: PragmaTable = dict(pragmas or {})
        self.extend(records)

    @classmethod
    def from_source(cls, source: str, *, parser: TextParser | None = None) -> TextTable:
        """Parse source text into a table.

        Args:
            source: Localization source text
            parser: Configured parser (default: TextParser())

        Returns:
            New TextTable with the parsed records and pragmas

        Raises:
            TextParseError: On a fatal format error
            DuplicateTextIdError: If the source defines an id twice
        """
        if parser is None:
            parser = TextParser()
        result = parser.parse(source)
        return cls(result.records, result.pragmas)

    def to_source(self, *, validate: bool = False) -> str:
        """Serialize pragmas and records back to source text."""
        return serialize(self._records, self.pragmas, validate=validate)

    # -- Sequence / container protocol

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TextRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> TextRecord:
        return self._records[index]

    def __setitem__(self, index: int, record: TextRecord) -> None:
        """Replace the record at index.

        The new record may reuse the replaced record's id, but must not
        collide with any other record.

        Raises:
            DuplicateTextIdError: If record.id belongs to another record
            IndexError: If index is out of range
        """
        current = self._records[index]
        if record.id != current.id:
            self._ensure_unique(record.id)
            del self._by_id[current.id]
        self._records[index] = record
        self._by_id[record.id] = record

    def __contains__(self, text_id: object) -> bool:
        return text_id in self._by_id

    def __repr__(self) -> str:
        return f"TextTable(records={len(self._records)}, pragmas={self.pragmas!r})"

    @property
    def records(self) -> tuple[TextRecord, ...]:
        """Records in table order."""
        return tuple(self._records)

    def ids(self) -> list[str]:
        """Text ids in table order."""
        return [record.id for record in self._records]

    # -- Mutation

    def add(self, record: TextRecord) -> None:
        """Append a record.

        Raises:
            DuplicateTextIdError: If record.id already exists
        """
        self._ensure_unique(record.id)
        self._records.append(record)
        self._by_id[record.id] = record

    def insert(self, index: int, record: TextRecord) -> None:
        """Insert a record before index.

        Raises:
            DuplicateTextIdError: If record.id already exists
        """
        self._ensure_unique(record.id)
        self._records.insert(index, record)
        self._by_id[record.id] = record

    def extend(self, records: Iterable[TextRecord]) -> None:
        """Append records in order.

        Records before a colliding one are kept.

        Raises:
            DuplicateTextIdError: On the first id that already exists
        """
        for record in records:
            self.add(record)

    def remove(self, text_id: str) -> TextRecord:
        """Remove and return the record with text_id.

        Raises:
            KeyError: If text_id is not in the table
        """
        record = self._by_id.pop(text_id)
        self._records.remove(record)
        return record

    def clear(self) -> None:
        """Remove all records. Pragmas are kept."""
        self._records.clear()
        self._by_id.clear()

    # -- Lookup

    def get(self, text_id: str) -> TextRecord | None:
        """Return the record with text_id, or None."""
        return self._by_id.get(text_id)

    def lookup(
        self,
        text_id: str,
        locale: str,
        default_locale: str = DEFAULT_LOCALE,
    ) -> str:
        """Resolve one text id for locale.

        Args:
            text_id: Identifier to look up
            locale: Requested locale code
            default_locale: Locale tried second (default: "en")

        Returns:
            Resolved text. For an unknown id, "<id> (no-locale)" so the
            missing key is visible in the UI.
        """
        record = self._by_id.get(text_id)
        if record is None:
            logger.warning("%s", ErrorTemplate.text_not_found(text_id).message)
            return FALLBACK_MISSING_TEXT.format(id=text_id)
        return resolve(record, locale, default_locale)

    def lookup_in(self, context: ResolutionContext, text_id: str) -> str:
        """Resolve one text id with an explicit ResolutionContext."""
        return self.lookup(text_id, context.current_locale, context.default_locale)

    def _ensure_unique(self, text_id: str) -> None:
        if text_id in self._by_id:
            raise DuplicateTextIdError(ErrorTemplate.duplicate_text_id(text_id), text_id=text_id)
