"""Serialize TextRecords back to localization text.

Inverse of TextParser. Useful for:
- Saving programmatically edited tables
- Normalizing hand-written files
- Property-based testing (roundtrip: parse -> serialize -> parse)

Output shape::

    #pragma ReplaceTMPInvalidChars true
    GREETING => en="Hello, \\"friend\\"", tr="Merhaba"

Python 3.13+.
"""

from collections.abc import Iterable, Mapping

from loctext.constants import (
    COMMENT_CHAR,
    ESCAPE_CHAR,
    HEADER_SEPARATOR,
    LINE_DELIMITER,
    LOCALE_ASSIGN,
    LOCALE_SEPARATOR,
    PRAGMA_CHAR,
    PRAGMA_MARKER,
    QUOTE_CHAR,
)
from loctext.syntax.records import TextRecord

__all__ = [
    "SerializationValidationError",
    "TextSerializer",
    "escape_value",
    "serialize",
]

_ESCAPES: dict[str, str] = {
    QUOTE_CHAR: ESCAPE_CHAR + QUOTE_CHAR,
    ESCAPE_CHAR: ESCAPE_CHAR + ESCAPE_CHAR,
    "\n": ESCAPE_CHAR + "n",
    "\t": ESCAPE_CHAR + "t",
}

_ESCAPE_TABLE = str.maketrans(_ESCAPES)

_LOCALE_FORBIDDEN: frozenset[str] = frozenset(
    {LOCALE_ASSIGN, LOCALE_SEPARATOR, QUOTE_CHAR, ESCAPE_CHAR}
)


class SerializationValidationError(ValueError):
    """Raised when records cannot be written as parseable text.

    Common causes:
    - Text id that is empty, contains '=>' or a newline, or would be read
      back as a comment or directive
    - Locale code that is empty or contains '=', ',', '"' or whitespace
    - Pragma key or value that is empty or contains whitespace
    """


def escape_value(value: str) -> str:
    """Escape a value for writing between quotes.

    Exact inverse of the decoder: '"' -> '\\"', '\\' -> '\\\\',
    LF -> '\\n', TAB -> '\\t'. Everything else passes through.

    Example:
        >>> escape_value('say "hi"\\n')
        'say \\\\"hi\\\\"\\\\n'
    """
    return value.translate(_ESCAPE_TABLE)


def _validate_record(record: TextRecord) -> None:
    """Check that a record survives a parse round-trip unchanged.

    Raises:
        SerializationValidationError: If validation fails
    """
    text_id = record.id
    stripped = text_id.strip()
    if not stripped:
        msg = "Text id must not be empty"
        raise SerializationValidationError(msg)
    if stripped != text_id:
        msg = f"Text id {text_id!r} has leading or trailing whitespace"
        raise SerializationValidationError(msg)
    if HEADER_SEPARATOR in text_id or LINE_DELIMITER in text_id:
        msg = f"Text id {text_id!r} must not contain '=>' or a newline"
        raise SerializationValidationError(msg)
    if text_id.startswith((COMMENT_CHAR, PRAGMA_CHAR)):
        msg = f"Text id {text_id!r} would be read back as a comment or directive"
        raise SerializationValidationError(msg)

    for locale in record.locales:
        if not locale or any(c.isspace() or c in _LOCALE_FORBIDDEN for c in locale):
            msg = f"Locale code {locale!r} in text id '{text_id}' is not serializable"
            raise SerializationValidationError(msg)


def _validate_pragmas(pragmas: Mapping[str, str]) -> None:
    """Check that every pragma fits on one '#pragma key value' line.

    Raises:
        SerializationValidationError: If validation fails
    """
    for key, value in pragmas.items():
        for token in (key, value):
            if not token or any(c.isspace() for c in token):
                msg = f"Pragma {key!r} -> {value!r}: key and value must be non-empty without whitespace"
                raise SerializationValidationError(msg)


class TextSerializer:
    """Converts records back to localization source text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> serializer = TextSerializer()
        >>> print(serializer.serialize([TextRecord("HI", {"en": "Hi"})]), end="")
        HI => en="Hi"
    """

    def serialize(
        self,
        records: Iterable[TextRecord],
        pragmas: Mapping[str, str] | None = None,
        *,
        validate: bool = False,
    ) -> str:
        """Serialize records (and pragmas) to source text.

        Args:
            records: Records in output order
            pragmas: Pragma table written before the records (optional)
            validate: If True, reject data that would not parse back
                     identically (default: False)

        Returns:
            Source text, one newline-terminated line per pragma and record

        Raises:
            SerializationValidationError: If validate=True and data is invalid
        """
        output: list[str] = []

        if pragmas:
            if validate:
                _validate_pragmas(pragmas)
            for key, value in pragmas.items():
                output.append(f"{PRAGMA_MARKER} {key} {value}{LINE_DELIMITER}")

        for record in records:
            if validate:
                _validate_record(record)
            self._serialize_record(record, output)

        return "".join(output)

    def _serialize_record(self, record: TextRecord, output: list[str]) -> None:
        """Serialize one record as a single line."""
        output.append(f"{record.id} {HEADER_SEPARATOR} ")
        output.append(
            f"{LOCALE_SEPARATOR} ".join(
                f"{locale}{LOCALE_ASSIGN}{QUOTE_CHAR}{escape_value(value)}{QUOTE_CHAR}"
                for locale, value in record.locales.items()
            )
        )
        output.append(LINE_DELIMITER)


def serialize(
    records: Iterable[TextRecord],
    pragmas: Mapping[str, str] | None = None,
    *,
    validate: bool = False,
) -> str:
    """Serialize records to localization source text.

    Convenience wrapper around TextSerializer.

    Args:
        records: Records in output order
        pragmas: Pragma table written first (optional)
        validate: Reject data that would not round-trip (default: False)

    Returns:
        Source text
    """
    return TextSerializer().serialize(records, pragmas, validate=validate)
