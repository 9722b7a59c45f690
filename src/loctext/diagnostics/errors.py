"""loctext exception hierarchy with structured diagnostics.

Only fatal problems are exceptions. Line-local problems the parser can
recover from are returned as warning Diagnostics instead (see ParseResult).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocTextError(Exception):
    """Base exception for all loctext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocTextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TextParseError(LocTextError):
    """Fatal format error; the whole parse is aborted.

    Raised for a malformed pragma line, and for a missing '=>' header or a
    duplicate pragma key when the parser is configured to raise on those.

    Attributes:
        line: 1-based line number of the offending line
        column: 1-based column, if known
        line_text: Raw text of the offending line
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic)
        self.line: int | None = diagnostic.line
        self.column: int | None = diagnostic.column
        self.line_text: str = diagnostic.source_line or ""

    @property
    def reason(self) -> str:
        """Short human-readable description without location decoration."""
        return self.diagnostic.message if self.diagnostic is not None else str(self)


class LocaleDefinitionError(LocTextError):
    """One 'locale="value"' segment could not be decoded.

    Line-local: TextParser catches it, records a warning and skips the line.
    """


class DuplicateTextIdError(LocTextError, ValueError):
    """A text id already exists in the owning TextTable.

    Attributes:
        text_id: The colliding identifier
    """

    def __init__(self, message: str | Diagnostic, *, text_id: str) -> None:
        super().__init__(message)
        self.text_id = text_id
